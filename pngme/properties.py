import logging


class Dependency:
    '''This makes the relation between fields of the same record possible.

    In practice this class allows to write something like

        class Simple(Record):
            length = fields.StructField('I')
            data = fields.StringField(Dependency('.length'))

    and have the length of the string contained in the field named 'data'
    strictly connected to the field named 'length': unpacking reads the
    length to know how many bytes to take, packing writes back the actual
    size of the data into the length.

    The leading '.' indicates we refer to a field at the same level, it's
    the only kind of resolution supported.
    '''
    def __init__(self, expression):
        if not expression.startswith('.'):
            raise ValueError(f'only relative expressions are supported, got \'{expression}\'')

        self.expression = expression
        self.field_name = expression[1:]
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.expression})>'

    def resolve(self, record):
        value = record._values[self.field_name]
        self.logger.debug(' resolved \'%s\' with value %s' % (self.expression, value))

        return value

    def resolve_and_set(self, record, value):
        record._values[self.field_name] = value
