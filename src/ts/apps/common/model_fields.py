"""
Custom Django model fields for common patterns.
"""
from django.core.exceptions import ValidationError
from django.db import models

from .enums import LabeledEnum


class LabeledEnumDescriptor:
    """
    Converts the raw attribute value to an enum instance on access. Class
    access returns the field itself (admin and _meta need that).
    """

    def __init__(self, field):
        self.field = field

    def __get__(self, instance, owner):
        if instance is None:
            return self.field
        value = instance.__dict__.get( self.field.attname )
        if value is None or isinstance( value, self.field.enum_class ):
            return value
        try:
            return self.field.to_python( value )
        except ValidationError:
            if self.field.use_safe_conversion:
                return self.field.enum_class.default()
            raise

    def __set__(self, instance, value):
        instance.__dict__[self.field.attname] = value


class LabeledEnumField(models.CharField):
    """
    Stores a LabeledEnum member as its lowercase name in a VARCHAR column
    and always hands back enum instances.

    No database choices are declared, so adding enum members never needs a
    migration. With use_safe_conversion=False an unknown stored or
    assigned value is an error instead of silently becoming the default,
    which is what permission-bearing columns want.

        level = LabeledEnumField( AttendeePermissionLevel, 'Level',
                                  use_safe_conversion = False )
        grant.level = 'manage'
        assert grant.level == AttendeePermissionLevel.MANAGE
    """

    description = "A field for storing LabeledEnum values as lowercase strings"

    def __init__(self, enum_class, *args, use_safe_conversion=True, **kwargs):
        if not issubclass(enum_class, LabeledEnum):
            raise TypeError(f"{enum_class} must be a subclass of LabeledEnum")

        self.enum_class = enum_class
        self.use_safe_conversion = use_safe_conversion

        if 'max_length' not in kwargs:
            max_len = max( len(str(e)) for e in enum_class )
            kwargs['max_length'] = max( 32, max_len + 10 )
        if 'default' not in kwargs:
            kwargs['default'] = str( enum_class.default() )

        super().__init__(*args, **kwargs)

    def _convert_from_string(self, value):
        if self.use_safe_conversion:
            return self.enum_class.from_name_safe(value)
        return self.enum_class.from_name(value)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs['enum_class'] = self.enum_class
        kwargs['use_safe_conversion'] = self.use_safe_conversion
        return name, path, args, kwargs

    def from_db_value(self, value, expression, connection):
        if value is None:
            return None
        try:
            return self._convert_from_string(value)
        except ValueError as e:
            raise ValidationError(
                f"Invalid database value '{value}' for {self.enum_class.__name__}: {e}"
            )

    def to_python(self, value):
        if value is None or isinstance( value, self.enum_class ):
            return value
        try:
            return self._convert_from_string( str(value) )
        except ValueError as e:
            raise ValidationError(
                f"Invalid value '{value}' for {self.enum_class.__name__}: {e}"
            )

    def get_prep_value(self, value):
        enum_instance = self.to_python(value)
        if enum_instance is None:
            return None
        return str(enum_instance)

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        if value is None:
            return None
        return str(value)

    def validate(self, value, model_instance):
        if value is None:
            if not self.null:
                raise ValidationError("This field cannot be null.")
            return

        # Skip CharField's choice validation; membership is checked below.
        string_value = str(value) if isinstance( value, self.enum_class ) else value
        super(models.CharField, self).validate( string_value, model_instance )
        try:
            self.to_python(value)
        except ValidationError:
            valid_values = [ str(e) for e in self.enum_class ]
            raise ValidationError(
                f"'{value}' is not a valid {self.enum_class.__name__}. "
                f"Valid values are: {', '.join(valid_values)}"
            )

    def formfield(self, **kwargs):
        from django import forms

        defaults = {
            'form_class': forms.TypedChoiceField,
            'choices': self.enum_class.choices(),
            'coerce': lambda val: self.to_python(val) if val else None,
        }
        defaults.update(kwargs)
        return super(models.CharField, self).formfield(**defaults)

    def contribute_to_class(self, cls, name, **kwargs):
        super().contribute_to_class(cls, name, **kwargs)
        setattr( cls, name, LabeledEnumDescriptor(self) )
