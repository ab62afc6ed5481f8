class DriverException(Exception):
    pass


class UsageError(DriverException):
    pass


class InputNotFoundError(DriverException):
    def __init__(self, name):
        super().__init__(f"file '{name}' does not exist.")
        self.name = name


class StageFailure(DriverException):
    def __init__(self, stage, code):
        super().__init__(f'{stage} failed with exit code {code}')
        self.stage = stage
        self.code = code
