"""Token kinds produced by the SQL lexer and the source locations it tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class TokenKind(IntEnum):
    """Numeric token codes shared by the lexer and the parser."""

    EMPTY = -2
    EOF = 0
    ERROR = 256
    UNDEF = 257
    IDENTIFIER = 258
    STRING = 259
    FLOATVAL = 260
    INTVAL = 261
    DEALLOCATE = 262
    PARAMETERS = 263
    INTERSECT = 264
    TEMPORARY = 265
    TIMESTAMP = 266
    DISTINCT = 267
    NVARCHAR = 268
    RESTRICT = 269
    TRUNCATE = 270
    ANALYZE = 271
    BETWEEN = 272
    CASCADE = 273
    COLUMNS = 274
    CONTROL = 275
    DEFAULT = 276
    EXECUTE = 277
    EXPLAIN = 278
    ENCODING = 279
    INTEGER = 280
    NATURAL = 281
    PREPARE = 282
    SCHEMAS = 283
    CHARACTER_VARYING = 284
    REAL = 285
    DECIMAL = 286
    SMALLINT = 287
    BIGINT = 288
    SPATIAL = 289
    VARCHAR = 290
    VIRTUAL = 291
    DESCRIBE = 292
    BEFORE = 293
    COLUMN = 294
    CREATE = 295
    DELETE = 296
    DIRECT = 297
    DOUBLE = 298
    ESCAPE = 299
    EXCEPT = 300
    EXISTS = 301
    EXTRACT = 302
    CAST = 303
    FORMAT = 304
    GLOBAL = 305
    HAVING = 306
    IMPORT = 307
    INSERT = 308
    ISNULL = 309
    OFFSET = 310
    RENAME = 311
    SCHEMA = 312
    SELECT = 313
    SORTED = 314
    TABLES = 315
    UNLOAD = 316
    UPDATE = 317
    VALUES = 318
    AFTER = 319
    ALTER = 320
    CROSS = 321
    DELTA = 322
    FLOAT = 323
    GROUP = 324
    INDEX = 325
    INNER = 326
    LIMIT = 327
    LOCAL = 328
    MERGE = 329
    MINUS = 330
    ORDER = 331
    OVER = 332
    OUTER = 333
    RIGHT = 334
    TABLE = 335
    UNION = 336
    USING = 337
    WHERE = 338
    CALL = 339
    CASE = 340
    CHAR = 341
    COPY = 342
    DATE = 343
    DATETIME = 344
    DESC = 345
    DROP = 346
    ELSE = 347
    FILE = 348
    FROM = 349
    FULL = 350
    HASH = 351
    HINT = 352
    INTO = 353
    JOIN = 354
    LEFT = 355
    LIKE = 356
    LOAD = 357
    LONG = 358
    NULL = 359
    PARTITION = 360
    PLAN = 361
    SHOW = 362
    TEXT = 363
    THEN = 364
    TIME = 365
    VIEW = 366
    WHEN = 367
    WITH = 368
    ADD = 369
    ALL = 370
    AND = 371
    ASC = 372
    END = 373
    FOR = 374
    INT = 375
    NOT = 376
    OFF = 377
    SET = 378
    TOP = 379
    AS = 380
    BY = 381
    IF = 382
    IN = 383
    IS = 384
    OF = 385
    ON = 386
    OR = 387
    TO = 388
    NO = 389
    ARRAY = 390
    CONCAT = 391
    ILIKE = 392
    SECOND = 393
    MINUTE = 394
    HOUR = 395
    DAY = 396
    MONTH = 397
    YEAR = 398
    SECONDS = 399
    MINUTES = 400
    HOURS = 401
    DAYS = 402
    MONTHS = 403
    YEARS = 404
    INTERVAL = 405
    TRUE = 406
    FALSE = 407
    BOOLEAN = 408
    TRANSACTION = 409
    BEGIN = 410
    COMMIT = 411
    ROLLBACK = 412
    NOWAIT = 413
    SKIP = 414
    LOCKED = 415
    SHARE = 416
    RANGE = 417
    ROWS = 418
    GROUPS = 419
    UNBOUNDED = 420
    FOLLOWING = 421
    PRECEDING = 422
    CURRENT_ROW = 423
    UNIQUE = 424
    PRIMARY = 425
    FOREIGN = 426
    KEY = 427
    REFERENCES = 428
    EQUALS = 429
    NOTEQUALS = 430
    LESS = 431
    GREATER = 432
    LESSEQ = 433
    GREATEREQ = 434
    NOTNULL = 435
    UMINUS = 436


@dataclass
class Location:
    """A span in the query text, updated as the lexer consumes input.

    ``total_column`` and ``string_length`` count every character consumed so
    far; the line and column fields describe the most recent token.
    """

    first_line: int = 0
    first_column: int = 0
    last_line: int = 0
    last_column: int = 0
    total_column: int = 0
    string_length: int = 0
    param_list: list[Any] = field(default_factory=list)

    def advance(self, text: str) -> None:
        """Move the span over ``text``, the text of the next token."""
        self.first_line = self.last_line
        self.first_column = self.last_column
        for char in text:
            self.total_column += 1
            self.string_length += 1
            if char == "\n":
                self.last_line += 1
                self.last_column = 0
            else:
                self.last_column += 1