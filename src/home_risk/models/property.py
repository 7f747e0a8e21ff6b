from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    city: str
    state: str
    country: str

    @property
    def full(self) -> str:
        return f"{self.number} {self.street}, {self.city}, {self.state}, {self.country}"


DEFAULT_ADDRESS = Address(
    street="Central Park West",
    number=115,
    city="New York",
    state="New York",
    country="United States",
)
