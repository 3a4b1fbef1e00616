from collections.abc import Mapping

from lazydb.settings import logger


def dict_row(cursor, row):
    return dict(zip([column[0] for column in cursor.description], row))


class PreparedStatement:
    """A query bound to a cursor, executed with ``execute(params)``.

    With ``silent=True`` errors of type ``error_class`` raised while executing
    are stored on ``error`` and ``execute`` returns False; otherwise they are
    raised unchanged.
    """

    def __init__(self, cursor, query, silent=False, error_class=Exception, row_factory=None):
        self._cursor = cursor
        self.query = query
        self.silent = silent
        self.error_class = error_class
        self.row_factory = row_factory
        self.error = None

    def execute(self, params=()) -> bool:
        if not isinstance(params, Mapping):
            params = tuple(params)
        logger.debug(f"Executing statement: {self.query} with params: {params}")
        self.error = None
        if not self.silent:
            self._cursor.execute(self.query, params)
            return True
        try:
            self._cursor.execute(self.query, params)
        except self.error_class as e:
            self.error = e
            return False
        return True

    def _convert(self, row):
        if row is None or self.row_factory is None:
            return row
        return self.row_factory(self._cursor, row)

    def fetch(self):
        return self._convert(self._cursor.fetchone())

    def fetchall(self):
        return [self._convert(row) for row in self._cursor.fetchall()]

    def fetch_column(self, index=0):
        """Return one column of the next row, or None when there are no rows left."""
        row = self.fetch()
        if row is None:
            return None
        if isinstance(row, Mapping):
            return list(row.values())[index]
        return row[index]

    @property
    def rowcount(self):
        return self._cursor.rowcount

    @property
    def lastrowid(self):
        return self._cursor.lastrowid

    def close(self):
        self._cursor.close()

    def __iter__(self):
        row = self.fetch()
        while row is not None:
            yield row
            row = self.fetch()

    def __getattr__(self, name):
        if name == '_cursor':
            raise AttributeError(name)
        return getattr(self._cursor, name)

    def __bool__(self):
        return True

    def __repr__(self):
        return f'PreparedStatement({self.query!r})'
