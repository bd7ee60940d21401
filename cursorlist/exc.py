class BaseCursorlistException(Exception):
    pass


class InvalidArgumentError(BaseCursorlistException, ValueError):
    """ Invalid input provided by the User

    Reported when a pagination argument is missing or out of range: e.g. `first` is zero.
    The request is rejected; no state is mutated.
    """

    def __init__(self, argument_name: str, err: str):
        self.argument_name = argument_name
        super().__init__(f'Invalid argument "{argument_name}": {err}')


class TransportError(BaseCursorlistException):
    """ Failed to deliver a page request or to receive its response

    Reported by client transports. Not fatal: the controller keeps the data it has and can retry.
    """
