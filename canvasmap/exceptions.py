class CanvasMapError(Exception):
    pass


class ConfigurationError(CanvasMapError):
    pass


class InputError(CanvasMapError):
    pass
