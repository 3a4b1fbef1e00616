import threading
from concurrent.futures import Future
from typing import Literal, Optional, Union

from lazydb import utils
from lazydb.config import ConnectionConfig
from lazydb.settings import DEFAULT_DRIVER, DEFAULT_SETTINGS_PATH, load_settings, logger
from lazydb.statement import PreparedStatement

RunResult = Union[PreparedStatement, Literal[False]]


class Database:
    """Lazily opened, shared database connection.

    The connection is opened by the first call that needs it and reused by
    every later call on the same ``Database``. Concurrent first calls share a
    single connect attempt. A failed attempt is not cached, so the next call
    tries again.

    Configuration is read when the connection is opened. Setters called after
    that still store their value but do not affect the open connection.

    Access to the shared connection is not serialized here. Whether it can be
    used from several threads at once is up to the client library; neither
    mysql-connector-python nor pyodbc connections allow it.

    Connections run with autocommit on unless the ``autocommit`` driver option
    is False. ``begin_transaction`` starts an explicit transaction that lasts
    until ``commit`` or ``rollback``.

    ``run`` reports failure by returning False. Every other operation raises
    whatever the client library raises.
    """

    def __init__(self, driver=DEFAULT_DRIVER, config: Optional[ConnectionConfig] = None):
        self.driver = utils.resolve_driver(driver)
        self.config = config or ConnectionConfig()
        self._connection = None
        self._options = None
        self._pending = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, path=DEFAULT_SETTINGS_PATH):
        settings = load_settings(path)
        return cls(settings['driver'], ConnectionConfig.from_mapping(settings['database']))

    def set_host(self, host):
        self.config.set_host(host)

    def set_port(self, port=3306):
        self.config.set_port(port)

    def set_db_name(self, db_name):
        self.config.set_db_name(db_name)

    def set_charset(self, charset='utf8mb4'):
        self.config.set_charset(charset)

    def set_user(self, user):
        self.config.set_user(user)

    def set_password(self, password):
        self.config.set_password(password)

    def set_driver_options(self, options):
        self.config.set_driver_options(options)

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def get_connection(self):
        """Return the shared connection, opening it on first use."""
        connection = self._connection
        if connection is not None:
            return connection

        with self._lock:
            if self._connection is not None:
                return self._connection
            pending = self._pending
            owner = pending is None
            if owner:
                pending = self._pending = Future()

        if not owner:
            return pending.result()

        try:
            connection, options = self._connect()
        except BaseException as e:
            with self._lock:
                self._pending = None
            pending.set_exception(e)
            raise

        with self._lock:
            self._options = options
            self._connection = connection
            self._pending = None
        pending.set_result(connection)
        return connection

    init = get_connection

    def _connect(self):
        options = dict(self.config.driver_options)
        descriptor = self.config.descriptor(self.driver.scheme)
        connection = self.driver.connect(descriptor, self.config.user, self.config.password, options)
        return connection, options

    def forward(self, operation, *args, **kwargs):
        """Call ``operation`` on the connection and return its result unchanged."""
        connection = self.get_connection()
        logger.debug(f"Forwarding {operation} to connection")
        return getattr(connection, operation)(*args, **kwargs)

    def cursor(self, *args, **kwargs):
        return self.forward('cursor', *args, **kwargs)

    def commit(self):
        return self.driver.commit(self.get_connection())

    def rollback(self):
        return self.driver.rollback(self.get_connection())

    def begin_transaction(self):
        return self.driver.begin(self.get_connection())

    def last_insert_id(self):
        return self.driver.last_insert_id(self.get_connection())

    def prepare(self, query):
        connection = self.get_connection()
        return self.driver.prepare(connection, query, self._options)

    def run(self, query, params=()) -> RunResult:
        """Prepare and execute ``query``.

        Returns the executed statement to fetch from, or False if preparing or
        executing it failed.
        """
        statement = self.prepare(query)
        if not statement:
            return False
        if not statement.execute(params):
            return False
        return statement
