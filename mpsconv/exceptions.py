'''
Custom exception classes, for finer grained error handling
'''


class MPSException(Exception):
    '''Parent class for all our exceptions'''
    pass


class MPSSyntaxError(MPSException):
    '''Raised when a line does not fit the section the parser is in'''

    def __init__(self, line_number, line, state=None, reason="unexpected line"):
        self.line_number = line_number
        self.line = line
        self.state = state
        self.reason = reason
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return f'line {self.line_number}: {self.reason}'
        return f'line {self.line_number}: {self.reason}: "{self.line}"'


class DuplicateObjectiveError(MPSSyntaxError):
    '''Raised when the ROWS section declares a second `N` row'''
    pass

class DuplicateRowError(MPSSyntaxError):
    '''Raised when a row name is declared twice in the ROWS section'''
    pass

class UnknownReferenceError(MPSSyntaxError):
    '''Raised when COLUMNS or RHS refer to a row that was never declared'''

    def __init__(self, line_number, line, reference, state=None):
        self.reference = reference
        super().__init__(line_number, line, state=state, reason=f"unknown row '{reference}'")

class DuplicateRHSError(MPSSyntaxError):
    '''Raised when a right hand side is assigned twice and duplicates are not allowed'''
    pass

class UnexpectedEndOfInputError(MPSSyntaxError):
    '''Raised when the input ends before the ENDATA marker'''
    pass


class MPSReadError(MPSException):
    '''Raised when the input stream can not be read or decoded'''
    pass

class NotSupportedError(MPSException):
    '''Raised when an optional dependency is not installed'''
    pass
