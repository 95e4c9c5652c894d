from django.contrib.auth.base_user import BaseUserManager


class CustomUserManager( BaseUserManager ):
    """
    Manager for a user model keyed by email (or phone) instead of a
    username. Blank emails and phones are stored as NULL so the unique
    constraints only apply to real values.
    """

    use_in_migrations = True

    @classmethod
    def normalize_identifier_email( cls, email : str ) -> str:
        if not email or not email.strip():
            return None
        return cls.normalize_email( email.strip() ).lower()

    @classmethod
    def normalize_phone( cls, phone : str ) -> str:
        if not phone or not phone.strip():
            return None
        return phone.strip()

    def _create_user( self, email, password, **extra_fields ):
        email = self.normalize_identifier_email( email )
        extra_fields['phone'] = self.normalize_phone( extra_fields.get( 'phone' ))
        user = self.model( email = email, **extra_fields )
        if password:
            user.set_password( password )
        else:
            user.set_unusable_password()
        user.save( using = self._db )
        return user

    def create_user( self, email = None, password = None, **extra_fields ):
        extra_fields.setdefault( 'is_staff', False )
        extra_fields.setdefault( 'is_superuser', False )
        return self._create_user( email, password, **extra_fields )

    def create_superuser( self, email, password, **extra_fields ):
        extra_fields.setdefault( 'is_staff', True )
        extra_fields.setdefault( 'is_superuser', True )
        if extra_fields.get( 'is_staff' ) is not True:
            raise ValueError( 'Superuser must have is_staff=True.' )
        if extra_fields.get( 'is_superuser' ) is not True:
            raise ValueError( 'Superuser must have is_superuser=True.' )
        return self._create_user( email, password, **extra_fields )

    def real_accounts( self ):
        return self.filter( is_placeholder = False )

    def placeholders( self ):
        return self.filter( is_placeholder = True )
