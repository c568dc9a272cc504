from libris.models.author import Author
from libris.models.book import Book, Genre

__all__ = ["Author", "Book", "Genre"]
