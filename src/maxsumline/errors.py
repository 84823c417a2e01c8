class InputError(ValueError):
    pass


class InvalidPathError(InputError):
    pass


class FileAccessError(InputError):
    pass
