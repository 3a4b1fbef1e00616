import mysql.connector

from lazydb import options as opts
from lazydb.drivers.base import Driver
from lazydb.settings import logger
from lazydb.statement import PreparedStatement


class MySQLDriver(Driver):
    scheme = 'mysql'
    error_class = mysql.connector.Error

    def connect(self, descriptor, user, password, options):
        fields = self.parse_descriptor(descriptor)
        opts.fetch_mode(options)
        kwargs = {'host': fields.get('host', '')}
        if fields.get('port'):
            kwargs['port'] = int(fields['port'])
        if fields.get('dbname'):
            kwargs['database'] = fields['dbname']
        if fields.get('charset'):
            kwargs['charset'] = fields['charset']
        if user is not None:
            kwargs['user'] = user
        if password is not None:
            kwargs['password'] = password
        kwargs.update(opts.connect_kwargs(options))
        logger.info(f"Connecting to MySQL database at {kwargs['host']}")
        return mysql.connector.connect(**kwargs)

    def prepare(self, handle, query, options):
        silent = opts.is_silent(options)
        prepared = not options.get(opts.ATTR_EMULATE_PREPARES, False)
        dictionary = opts.fetch_mode(options) == opts.FETCH_ASSOC
        logger.debug(f"Preparing query: {query}")
        try:
            cursor = handle.cursor(prepared=prepared, dictionary=dictionary)
        except self.error_class:
            if silent:
                return False
            raise
        return PreparedStatement(cursor, query, silent=silent, error_class=self.error_class)

    def begin(self, handle):
        handle.start_transaction()

    def last_insert_id(self, handle):
        cursor = handle.cursor()
        try:
            cursor.execute("SELECT LAST_INSERT_ID()")
            row = cursor.fetchone()
        finally:
            cursor.close()
        return row[0]
