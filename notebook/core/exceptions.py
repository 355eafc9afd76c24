"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Tree errors carry the path that triggered them when it is known.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a path or resource cannot be found."""

    def __init__(
        self,
        message: str = "Resource not found",
        path: str | None = None,
        code: str = "RES_NOT_FOUND",
    ) -> None:
        self.path = path
        super().__init__(message, code=code)


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: dict | None = None,
        code: str = "VAL_VALIDATION_ERROR",
    ) -> None:
        self.details = details or {}
        super().__init__(message, code=code)


class ConflictError(ApplicationError):
    """Raised when there is a state conflict."""

    def __init__(
        self,
        message: str = "Resource conflict",
        path: str | None = None,
        code: str = "RES_CONFLICT",
    ) -> None:
        self.path = path
        super().__init__(message, code=code)


class DatabaseError(ApplicationError):
    """Raised when a database operation fails."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message, code="SYS_DATABASE_ERROR")


class NamelessFolderError(ValidationError):
    """Raised when a folder path has no final title (including the root)."""

    def __init__(self, path: str = "") -> None:
        self.path = path
        super().__init__(
            "Book title must not be empty",
            details={"path": path},
            code="TREE_NAMELESS_FOLDER",
        )


class NamelessNoteError(ValidationError):
    """Raised when a note title is empty."""

    def __init__(self, path: str = "") -> None:
        self.path = path
        super().__init__(
            "Note title must not be empty",
            details={"path": path},
            code="TREE_NAMELESS_NOTE",
        )


class BookLessNoteError(NotFoundError):
    """Raised when a note path does not name an existing parent book."""

    def __init__(self, path: str = "") -> None:
        super().__init__(
            "Note must live inside a book",
            path=path,
            code="TREE_BOOKLESS_NOTE",
        )


class NonEmptyBookError(ConflictError):
    """Raised on a non-recursive delete of a book that has children."""

    def __init__(self, path: str = "") -> None:
        super().__init__(
            "Book is not empty",
            path=path,
            code="TREE_NON_EMPTY_BOOK",
        )


class OverwriteNotAllowedError(ConflictError):
    """Raised when a move or copy destination is occupied."""

    def __init__(self, path: str = "") -> None:
        super().__init__(
            "Destination note already exists",
            path=path,
            code="TREE_OVERWRITE_NOT_ALLOWED",
        )
