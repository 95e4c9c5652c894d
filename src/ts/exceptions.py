class SharingError( Exception ):
    """ Base for recoverable failures of companion and attendee operations. """
    pass


class NotFoundError( SharingError ):
    pass


class AlreadyExistsError( SharingError ):
    pass


class SelfReferenceError( SharingError ):
    pass


class InvalidLevelError( SharingError ):
    pass


class PlaceholderDetailsRequiredError( SharingError ):
    """ No account holds the identifier and no name was given to create one. """
    pass


class InvalidResourceKindError( SharingError ):
    pass


class IdentifierRequiredError( SharingError ):
    """ Neither an email address nor a phone number was given. """
    pass
