# base of all exceptions raised by lzw12
class LZWError(Exception):
    ...


# bad operation or argument count on the command line
class ArgumentError(LZWError):
    ...


# packed stream or code sequence that cannot have come from the encoder
class FormatError(LZWError):
    ...
