class MagnetError(ValueError):
    kind = "MagnetError"


class MalformedUriError(MagnetError):
    kind = "MalformedUri"


class UnknownKeyError(MagnetError):
    kind = "UnknownKey"


class MalformedKeyError(MagnetError):
    kind = "MalformedKey"


class UnknownHashSchemeError(MagnetError):
    kind = "UnknownHashScheme"


class UnsupportedHashSchemeError(MagnetError):
    kind = "UnsupportedHashScheme"


class InvalidHashEncodingError(MagnetError):
    kind = "InvalidHashEncoding"


class MalformedMagnetError(MagnetError):
    kind = "MalformedMagnet"


class InvalidUrlError(MagnetError):
    kind = "InvalidUrl"


class InvalidEncodingError(MagnetError):
    kind = "InvalidEncoding"


class InvalidIntegerError(MagnetError):
    kind = "InvalidInteger"
