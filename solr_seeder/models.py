from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class User:
    id: int
    username: str
    email: str
    age: int
    active: bool
    balance: float

    def to_document(self) -> Dict[str, Any]:
        """Solr document with dynamic-field suffixes."""
        return {
            "id": self.id,
            "username_s": self.username,
            "email_s": self.email,
            "age_i": self.age,
            "active_b": self.active,
            "balance_f": self.balance,
        }


@dataclass
class Movie:
    id: int
    title: str
    director: str
    release_year: int
    genre: str
    rating: float
    is_available: bool
    duration: float

    def to_document(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title_s": self.title,
            "director_s": self.director,
            "release_year_i": self.release_year,
            "genre_s": self.genre,
            "rating_f": self.rating,
            "is_available_b": self.is_available,
            "duration_f": self.duration,
        }
