import logging
from typing import Any, Mapping, MutableMapping


class Dependency:
    '''This makes the relation between fields possible.

    In practice this class allows to write something like

        class Simple(Chunk):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    strictly connected to the field named 'length'.

    The relation is defined in one direction for unpacking (the length is read
    first and tells how many bytes to read) and is reversed when a chunk is
    built from values (the length is derived from the data).

    The leading '.' indicates that the field lives at the same level, that is
    the only kind of resolution supported.
    '''
    def __init__(self, expression: str):
        if not expression.startswith('.') or len(expression) < 2:
            raise ValueError(f"dependency expression '{expression}' must be in the form '.<field name>'")

        self.expression = expression
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    @property
    def field_name(self) -> str:
        return self.expression[1:]

    def resolve(self, values: Mapping[str, Any]) -> Any:
        '''With this method we resolve the attribute with respect to the values
        of the sibling fields already available.'''
        self.logger.debug('trying to resolve \'%s\'' % self.expression)

        try:
            value = values[self.field_name]
        except KeyError:
            raise AttributeError(f"I could not resolve '{self.expression}', is the field declared before?")

        self.logger.debug(' resolved with value %s' % value)

        return value

    def resolve_and_set(self, values: MutableMapping[str, Any], value: Any) -> None:
        """Set the value of the field we depend on"""
        self.logger.debug('setting \'%s\' to %s' % (self.expression, value))
        values[self.field_name] = value
