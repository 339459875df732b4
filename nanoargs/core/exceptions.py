# core/exceptions.py

class NanoArgsError(Exception):
    """Base exception for all nanoargs errors"""
    
    def __init__(self, message, recoverable=True, recovery_steps=None, *args):
        self.recoverable = recoverable
        self.recovery_steps = recovery_steps or []
        super().__init__(message, *args)

class ArgumentError(NanoArgsError):
    """Lookup failures against a parsed argument vector"""
    
    def __init__(self, message, name=None, recovery_steps=None, *args):
        self.name = name
        super().__init__(message, recoverable=True, recovery_steps=recovery_steps, *args)

class MissingArgumentError(ArgumentError):
    """A required argument was not supplied"""
    
    def __init__(self, name, message=None, *args):
        message = message or f"Missing required argument: {name}"
        recovery_steps = [
            f"Pass '{name}' on the command line",
            "Use the defaulting accessor if the argument is optional"
        ]
        super().__init__(message, name=name, recovery_steps=recovery_steps, *args)

class InvalidFormatError(ArgumentError):
    """An argument value was present but could not be converted"""
    
    def __init__(self, name, value, expected_type=None, message=None, *args):
        self.value = value
        self.expected_type = expected_type
        if message is None:
            if expected_type:
                message = f"Invalid value for {name}: {value!r} is not a valid {expected_type}"
            else:
                message = f"Invalid value for {name}: {value!r}"
        recovery_steps = ["Check the value passed on the command line"]
        if expected_type:
            recovery_steps.append(f"Supply '{name}' as a {expected_type}")
        super().__init__(message, name=name, recovery_steps=recovery_steps, *args)

class ConfigError(NanoArgsError):
    """Configuration related errors"""
    
    def __init__(self, message, config_key=None, invalid_value=None, expected_type=None, *args,
                 recovery_steps=None):
        self.config_key = config_key
        self.invalid_value = invalid_value
        self.expected_type = expected_type
        if recovery_steps is None:
            recovery_steps = ["Check configuration file format", "Verify configuration values"]
            if config_key:
                recovery_steps.append(f"Validate the '{config_key}' setting")
        super().__init__(message, recoverable=True, recovery_steps=recovery_steps, *args)

class DialectError(ConfigError):
    """Invalid or unknown parser dialect"""
    
    def __init__(self, message, dialect=None, config_key=None, invalid_value=None):
        self.dialect = dialect
        recovery_steps = [
            "Use one of the built-in dialects",
            "Give every prefix at least one character"
        ]
        super().__init__(
            message,
            config_key=config_key,
            invalid_value=invalid_value,
            recovery_steps=recovery_steps
        )
