#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    """Run administrative tasks."""
    if sys.argv[1:2] == [ 'test' ]:
        os.environ.setdefault( 'DJANGO_SETTINGS_MODULE', 'ts.settings.ci' )
    os.environ.setdefault( 'DJANGO_SETTINGS_MODULE', 'ts.settings.development' )
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc

    add_runserver_port_if_needed()
    execute_from_command_line( sys.argv )


def add_runserver_port_if_needed():
    """
    Bind runserver to localhost and DJANGO_SERVER_PORT when the caller
    gave no address of their own.
    """
    if len( sys.argv ) < 2 or sys.argv[1] != 'runserver':
        return
    positional_args = [ x for x in sys.argv[2:] if not x.startswith( '--' ) ]
    if positional_args:
        return

    default_port = os.environ.get( 'DJANGO_SERVER_PORT' )
    if default_port:
        sys.argv.append( f'localhost:{default_port}' )
    else:
        sys.argv.append( 'localhost' )
    return


if __name__ == '__main__':
    main()
