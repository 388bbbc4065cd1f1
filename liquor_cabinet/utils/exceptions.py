from fastapi import HTTPException, status


class UnauthorizedException(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BottleNotFoundException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail="Bottle not found"
        )


class CocktailNotFoundException(HTTPException):
    def __init__(self, detail: str = "Cocktail not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class InvalidImageException(HTTPException):
    def __init__(self, detail: str = "Invalid image format"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class BottleNotRecognizedException(HTTPException):
    """Le modèle a répondu {"error": "..."} : aucune bouteille reconnue."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class EmptySearchQueryException(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )


class AIResponseParseError(HTTPException):
    """Réponse du modèle non-JSON ou de forme inattendue."""

    def __init__(self, detail: str = "Failed to parse AI response"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )


class AIServiceUnavailableError(HTTPException):
    def __init__(self, detail: str = "No response from AI"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )
