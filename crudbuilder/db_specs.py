class BaseSpec:
    """A base class for placeholder styles, to render bound parameters for different database drivers."""

    VALUE_ESCAPE = None  # a marker which is used as placeholder for sql parameter, to avoid sql injections

    def __init__(self):
        assert self.VALUE_ESCAPE, f"{self.__class__.__name__} should define value escape."

    @property
    def value_escape(self):
        return str(self.VALUE_ESCAPE)

    def placeholders(self, count):
        """Return `count` comma separated placeholders, e.g. '?, ?, ?'."""
        return ', '.join(self.value_escape for _ in range(count))

    def __repr__(self):
        return f'{self.__class__.__name__}()'


class SQLiteSpec(BaseSpec):
    VALUE_ESCAPE = '?'


class PostgreSQLSpec(BaseSpec):
    VALUE_ESCAPE = '%s'


default_spec = SQLiteSpec()
