class TlsDebugError(Exception):
    """ Base class for errors raised by tlsdebug. """

class ConfigError(TlsDebugError):
    """ An environment setting could not be interpreted. """
