"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class XmlParseError(ApplicationError):
    """Exception raised when an XML document cannot be parsed."""

    def __init__(self, message: str = "Malformed XML document", original_exception: Exception | None = None) -> None:
        super().__init__(message, original_exception)
        self.message = f"XML Error: {message}"


class AttributeConversionError(ApplicationError):
    """Exception raised when attribute content cannot be converted to its typed value."""

    def __init__(
        self,
        message: str = "Attribute conversion failed",
        original_exception: Exception | None = None,
        attribute_name: str | None = None,
    ) -> None:
        super().__init__(message, original_exception)
        self.attribute_name = attribute_name
        self.message = f"Conversion Error: {message}"
        if attribute_name:
            self.message += f" (Attribute: {attribute_name})"
