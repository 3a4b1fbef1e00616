from typing import Any, Dict, Optional

from lazydb import options as opts


class ConnectionConfig:
    """Connection parameters read once, when the connection is first opened.

    Setters may be called at any time, but a change made after the connection
    exists is stored and ignored: the live connection keeps the values it was
    opened with.
    """

    def __init__(self):
        self.host: str = ''
        self.port: int = 3306
        self.db_name: Optional[str] = None
        self.charset: str = 'utf8mb4'
        self.user: Optional[str] = None
        self.password: Optional[str] = None
        self.driver_options: Dict[Any, Any] = dict(opts.DEFAULT_DRIVER_OPTIONS)

    @classmethod
    def from_mapping(cls, mapping):
        """Build a config from a ``[database]`` settings table."""
        config = cls()
        if 'host' in mapping:
            config.set_host(mapping['host'])
        if 'port' in mapping:
            config.set_port(mapping['port'])
        if 'name' in mapping:
            config.set_db_name(mapping['name'])
        if 'charset' in mapping:
            config.set_charset(mapping['charset'])
        if 'user' in mapping:
            config.set_user(mapping['user'])
        if 'pass' in mapping:
            config.set_password(mapping['pass'])
        if 'options' in mapping:
            config.set_driver_options(mapping['options'])
        return config

    def set_host(self, host: str):
        """The host must not contain ';', which separates descriptor fields."""
        self.host = host

    def set_port(self, port: int = 3306):
        self.port = port

    def set_db_name(self, db_name: Optional[str]):
        """The name must not contain ';': a later ``key=value`` would override earlier fields."""
        self.db_name = db_name

    def set_charset(self, charset: str = 'utf8mb4'):
        self.charset = charset

    def set_user(self, user: Optional[str]):
        self.user = user

    def set_password(self, password: Optional[str]):
        self.password = password

    def set_driver_options(self, options: Dict[Any, Any]):
        """Merge ``options`` into the current driver options; equal keys are overwritten."""
        self.driver_options = {**self.driver_options, **options}

    def descriptor(self, scheme: str) -> str:
        descriptor = f"{scheme}:host={self.host}"
        if self.port:
            descriptor += f";port={self.port}"
        if self.db_name:
            descriptor += f";dbname={self.db_name}"
        if self.charset:
            descriptor += f";charset={self.charset}"
        return descriptor

    def __repr__(self):
        # no password
        return (f'ConnectionConfig(host={self.host!r}, port={self.port!r}, '
                f'db_name={self.db_name!r}, charset={self.charset!r}, user={self.user!r})')
