from threading import Lock

# One lock per singleton class, created on first use.
_singleton_locks = {}
_singleton_locks_guard = Lock()


class Singleton:
    """
    Process-wide single instance per subclass. Subclasses put their
    one-time setup in __init_singleton__() rather than __init__().
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            with _singleton_locks_guard:
                lock = _singleton_locks.setdefault( cls, Lock() )
            with lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance.__init_singleton__()
                    cls._instance = instance
        return cls._instance

    def __init_singleton__(self):
        """ Subclasses can override this if needed. """
        return

    @classmethod
    def reset_singleton(cls):
        """ Drop the instance so the next access rebuilds it (tests). """
        cls._instance = None
        return
