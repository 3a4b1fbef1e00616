from abc import ABC, abstractmethod


class Driver(ABC):
    """Adapter around one database client library.

    ``connect`` receives the descriptor built by ``ConnectionConfig`` and
    returns the library's native connection, which becomes the shared handle.
    """
    scheme = None

    @abstractmethod
    def connect(self, descriptor, user, password, options):
        pass

    @abstractmethod
    def prepare(self, handle, query, options):
        pass

    @abstractmethod
    def begin(self, handle):
        pass

    @abstractmethod
    def last_insert_id(self, handle):
        pass

    def commit(self, handle):
        handle.commit()

    def rollback(self, handle):
        handle.rollback()

    def parse_descriptor(self, descriptor):
        """Split ``scheme:key=value;key=value`` into a dict of its fields."""
        scheme, _, body = descriptor.partition(':')
        if scheme != self.scheme:
            raise ValueError(f"Descriptor scheme {scheme!r} does not match driver scheme {self.scheme!r}")
        fields = {}
        for part in body.split(';'):
            if not part:
                continue
            key, _, value = part.partition('=')
            fields[key.strip()] = value.strip()
        return fields
