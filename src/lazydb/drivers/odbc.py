from lazydb import options as opts
from lazydb.drivers.base import Driver
from lazydb.settings import logger
from lazydb.statement import PreparedStatement, dict_row

pyodbc = None

ODBC_SPECIAL = (';', '{', '}')


def _get_pyodbc():
    global pyodbc
    if pyodbc is None:
        import importlib
        pyodbc = importlib.import_module('pyodbc')
    return pyodbc


def quote_value(value):
    """Brace-quote a connection string value that would otherwise split or pad it."""
    value = str(value)
    if any(c in value for c in ODBC_SPECIAL) or value != value.strip():
        return '{' + value.replace('}', '}}') + '}'
    return value


class ODBCDriver(Driver):
    """MySQL over ODBC. Every statement is prepared by the ODBC layer.

    ``begin`` turns autocommit off on the connection; ``commit`` and
    ``rollback`` turn it back on afterwards.
    """
    scheme = 'mysql'
    DEFAULT_ODBC_DRIVER = 'MySQL ODBC 8.0 Unicode Driver'

    def __init__(self):
        self._autocommit_before = None

    def build_connection_string(self, descriptor, user, password, options):
        fields = self.parse_descriptor(descriptor)
        odbc_driver = options.get(opts.ATTR_ODBC_DRIVER, self.DEFAULT_ODBC_DRIVER)
        parts = [f"Driver={{{odbc_driver.replace('}', '}}')}}}",
                 f"Server={quote_value(fields.get('host', ''))}"]
        if fields.get('port'):
            parts.append(f"Port={quote_value(fields['port'])}")
        if fields.get('dbname'):
            parts.append(f"Database={quote_value(fields['dbname'])}")
        if fields.get('charset'):
            parts.append(f"Charset={quote_value(fields['charset'])}")
        if user is not None:
            parts.append(f"Uid={quote_value(user)}")
        if password is not None:
            parts.append(f"Pwd={quote_value(password)}")
        return ';'.join(parts) + ';'

    def connect(self, descriptor, user, password, options):
        odbc = _get_pyodbc()
        opts.fetch_mode(options)
        connection_string = self.build_connection_string(descriptor, user, password, options)
        logger.info('Connecting to MySQL database over ODBC')
        return odbc.connect(connection_string, **opts.connect_kwargs(options))

    def prepare(self, handle, query, options):
        odbc = _get_pyodbc()
        silent = opts.is_silent(options)
        row_factory = dict_row if opts.fetch_mode(options) == opts.FETCH_ASSOC else None
        logger.debug(f"Preparing query: {query}")
        try:
            cursor = handle.cursor()
        except odbc.Error:
            if silent:
                return False
            raise
        return PreparedStatement(cursor, query, silent=silent, error_class=odbc.Error, row_factory=row_factory)

    def begin(self, handle):
        self._autocommit_before = handle.autocommit
        handle.autocommit = False

    def commit(self, handle):
        handle.commit()
        self._end_transaction(handle)

    def rollback(self, handle):
        handle.rollback()
        self._end_transaction(handle)

    def _end_transaction(self, handle):
        if self._autocommit_before is not None:
            handle.autocommit = self._autocommit_before
            self._autocommit_before = None

    def last_insert_id(self, handle):
        cursor = handle.cursor()
        try:
            cursor.execute("SELECT LAST_INSERT_ID()")
            row = cursor.fetchone()
        finally:
            cursor.close()
        return row[0]
