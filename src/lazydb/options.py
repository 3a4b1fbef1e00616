"""Driver option keys understood by every driver.

Keys not listed here are handed to the client library's ``connect`` call as
keyword arguments.
"""

ATTR_ERRMODE = 'errmode'
ERRMODE_EXCEPTION = 'exception'
ERRMODE_SILENT = 'silent'

ATTR_DEFAULT_FETCH_MODE = 'default_fetch_mode'
FETCH_ASSOC = 'assoc'
FETCH_NUM = 'num'

ATTR_EMULATE_PREPARES = 'emulate_prepares'

# Passed through to connect; both client libraries accept it
ATTR_AUTOCOMMIT = 'autocommit'

# Interpreted by ODBCDriver only
ATTR_ODBC_DRIVER = 'odbc_driver'

RESERVED_KEYS = (ATTR_ERRMODE, ATTR_DEFAULT_FETCH_MODE, ATTR_EMULATE_PREPARES, ATTR_ODBC_DRIVER)

DEFAULT_DRIVER_OPTIONS = {
    ATTR_ERRMODE: ERRMODE_EXCEPTION,
    ATTR_DEFAULT_FETCH_MODE: FETCH_ASSOC,
    # Server-side prepares keep integer columns as ints
    ATTR_EMULATE_PREPARES: False,
    ATTR_AUTOCOMMIT: True,
}


def fetch_mode(options):
    mode = options.get(ATTR_DEFAULT_FETCH_MODE, FETCH_ASSOC)
    if mode not in (FETCH_ASSOC, FETCH_NUM):
        raise ValueError(f"Unknown fetch mode {mode!r}. Valid: {FETCH_ASSOC!r}, {FETCH_NUM!r}")
    return mode


def is_silent(options):
    return options.get(ATTR_ERRMODE, ERRMODE_EXCEPTION) == ERRMODE_SILENT


def connect_kwargs(options):
    """Options that are not lazydb's own, passed straight to the client library."""
    return {k: v for k, v in options.items() if k not in RESERVED_KEYS}
