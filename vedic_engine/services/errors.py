class InvalidInputError(ValueError):
    """Raised when a required numeric field is NaN or infinite."""

    def __init__(self, field: str, value: object, planet: str | None = None):
        self.field = field
        self.value = value
        self.planet = planet
        where = f" for {planet}" if planet else ""
        super().__init__(f"{field}{where} must be a finite number, got {value!r}")
