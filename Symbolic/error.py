class MathError(Exception):
    def __init__(self, message, code="9999", expression=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.expression = expression

class RangeError(MathError):
    pass

class ConfigurationError(MathError):
    pass

class EvaluationError(MathError):
    pass



Error_Dictionary = {

    "1" : "Container Error",
    "2" : "Expression Error",
    "3" : "Operator Error",
    "9" : "Runtime Error"

}

#Error codes are structured in:
# 1. Digit: Main Error (see Error_Dictionary)
# 2. Digit: Specification (5 = configuration)
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1500" : "Load factor too low: ", # + given load factor
    "1501" : "Bucket count must be at least 1: ", # + given bucket count

    "2000" : "Cannot evaluate unknown variable: ", # + variable name

    "3000" : "Invalid argument bounds: ", # + min/max
    "3001" : "Too many arguments for function: ", # + function name
    "3002" : "Too few arguments for function: ", # + function name

    "9999" : "Unexpected Error: " #+error
}


def describe(error):
    """Return a one-line description of a MathError: category, code and message."""
    category = Error_Dictionary.get(error.code[:1], Error_Dictionary["9"])
    return f"{category} [{error.code}]: {error.message}"
