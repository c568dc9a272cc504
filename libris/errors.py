class LibrisError(Exception):
    """Base for errors the API reports back to the client."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(LibrisError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} with ID {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidReferenceError(LibrisError):
    """A book points at an author that does not exist."""

    status_code = 400

    def __init__(self, author_id: str) -> None:
        super().__init__(f"Author with ID {author_id} not found")
        self.author_id = author_id


class AuthorHasBooksError(LibrisError):
    status_code = 400

    def __init__(self, author_id: str, book_count: int) -> None:
        super().__init__(
            f"Cannot delete author with ID {author_id} because they have {book_count} "
            "associated books. Delete the books first or reassign them to another author."
        )
        self.author_id = author_id
        self.book_count = book_count


class DuplicateIsbnError(LibrisError):
    status_code = 409

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with ISBN {isbn} already exists")
        self.isbn = isbn
