class InvalidArgument(ValueError):
    """ Raised when a network or training session is configured with
    arguments that cannot produce a well-formed network
    """
