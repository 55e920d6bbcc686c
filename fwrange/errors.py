"""
Errors raised when the domain is used in a way it does not support.

Neither of them describes a property of the analyzed program: imprecision is
always expressed with the "top" or "bottom" elements. They indicate a bug in
the caller.
"""


class ContractViolation(ValueError):
    """
    Raised when an operation is called with arguments it cannot accept, such
    as bounds of the wrong width or an unsupported signedness.
    """
    pass


class UnsupportedOperation(ContractViolation):
    """
    Raised when calling an operation that the domain does not define.
    """
    pass
