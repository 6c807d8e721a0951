# virtual_art/client/errors.py


class ApiError(Exception):
    """
    Blad HTTP lub sieci. status None oznacza brak odpowiedzi serwera.
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status


class RequestCancelled(Exception):
    """Widok zostal zamkniety, wynik zapytania jest porzucany bez komunikatu."""


class ValidationFailed(Exception):
    """Walidacja po stronie klienta, zapytanie nie zostalo wyslane."""
