from enum import Enum


class LabeledEnum(Enum):
    """
    Enum whose members carry a label and description. Members are
    auto-numbered and their canonical string form is the lowercase name,
    which is also what gets persisted by LabeledEnumField.
    """

    def __new__(cls, *args, **kwds):
        value = len(cls.__members__) + 1
        obj = object.__new__(cls)
        obj._value_ = value
        return obj

    def __init__( self, label : str, description : str ):
        self.label = label
        self.description = description
        return

    @classmethod
    def all(cls):
        return [ x for x in cls ]

    @classmethod
    def choices(cls):
        return [ ( str(x), x.label ) for x in cls ]

    @classmethod
    def default(cls):
        """ Subclasses can override, else first item """
        return next(iter(cls))

    @classmethod
    def from_name( cls, name : str ):
        if name:
            for value in cls:
                if value.name.lower() == name.strip().lower():
                    return value
                continue
        raise ValueError( f'Unknown name value "{name}" for {cls.__name__}' )

    @classmethod
    def from_name_safe( cls, name : str ):
        try:
            return cls.from_name( name )
        except ValueError:
            return cls.default()

    @classmethod
    def coerce( cls, value ):
        """ Accepts a member or its name, raising ValueError for anything else. """
        if isinstance( value, cls ):
            return value
        if isinstance( value, str ):
            return cls.from_name( value )
        raise ValueError( f'Cannot convert {value!r} to {cls.__name__}' )

    def to_dict(self):
        return {
            'value': str(self),
            'label': self.label,
            'description': self.description,
        }

    def __str__(self):
        return self.name.lower()
