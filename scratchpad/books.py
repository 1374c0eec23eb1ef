"""An ordered catalogue of books with an interactive text menu."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

__all__ = ["Book", "BookList", "run_menu", "main"]

MAX_FIELD = 63

MENU = (
    "\n___  LINKED LIST MENU  ___\n"
    "1. Add Book.\n"
    "2. Print Books.\n"
    "3. Update Book.\n"
    "4. Insert Book.\n"
    "5. Delete Book.\n"
    "6. Exit.\n"
    "Enter Your Choice: "
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _clip(text: str) -> str:
    return text[:MAX_FIELD]


@dataclass
class Book:
    """A catalogue entry. Title and author keep at most 63 characters."""

    id: int
    title: str
    author: str

    def __post_init__(self) -> None:
        self.title = _clip(self.title)
        self.author = _clip(self.author)

    def format(self) -> str:
        return f"ID:  {self.id:<5d}  TITLE: {self.title:<30} AUTHOR: {self.author}"


class BookList:
    """Books in order, each given the next id when it is created."""

    def __init__(self) -> None:
        self._books: list[Book] = []
        self._next_id = 0

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def _create(self, title: str, author: str) -> Book:
        book = Book(self._next_id, title, author)
        self._next_id += 1
        return book

    def _find(self, book_id: int) -> Book | None:
        return next((book for book in self._books if book.id == book_id), None)

    def add(self, title: str, author: str) -> Book:
        """Append a new book at the end and return it."""
        book = self._create(title, author)
        self._books.append(book)
        return book

    def update(self, book_id: int, title: str, author: str) -> Book:
        """Replace the title and author of the book with ``book_id``.

        Raises KeyError when no book has that id.
        """
        book = self._find(book_id)
        if book is None:
            raise KeyError(book_id)
        book.title = _clip(title)
        book.author = _clip(author)
        return book

    def remove(self, title: str) -> bool:
        """Remove the first book with exactly this title; report whether one was found."""
        for position, book in enumerate(self._books):
            if book.title == title:
                del self._books[position]
                return True
        return False

    def insert(self, index: int, title: str, author: str) -> Book:
        """Insert a new book at ``index``, clamped to the start and end of the list."""
        book = self._create(title, author)
        position = min(max(index, 0), len(self._books))
        self._books.insert(position, book)
        return book

    def format(self) -> str:
        """Return one line per book, in order."""
        return "".join(book.format() + "\n" for book in self._books)


def _read_line(infile: TextIO) -> str:
    line = infile.readline()
    if not line:
        raise EOFError
    return line.split("\n", 1)[0]


def _ask(infile: TextIO, outfile: TextIO, prompt: str) -> str:
    outfile.write(prompt)
    outfile.flush()
    return _read_line(infile)


def _read_int(infile: TextIO) -> int | None:
    match = _LEADING_INT.match(_read_line(infile))
    return int(match.group(1)) if match else None


def _ask_book(infile: TextIO, outfile: TextIO) -> tuple[str, str]:
    title = _ask(infile, outfile, "Title: \n")
    author = _ask(infile, outfile, "Author: \n")
    return title, author


def _update_interactively(
    books: BookList, book_id: int, infile: TextIO, outfile: TextIO
) -> bool:
    if books._find(book_id) is None:
        return False
    title = _ask(infile, outfile, "Enter new Title: ")
    author = _ask(infile, outfile, "Enter new Author: ")
    books.update(book_id, title, author)
    return True


def run_menu(books: BookList, infile: TextIO, outfile: TextIO) -> None:
    """Serve the menu until the user picks Exit or input runs out."""
    try:
        while True:
            outfile.write(MENU)
            outfile.flush()
            choice = _read_int(infile)
            if choice == 1:
                books.add(*_ask_book(infile, outfile))
            elif choice == 2:
                outfile.write(books.format())
            elif choice == 3:
                outfile.write("Enter id to delete: ")
                book_id = _read_int(infile)
                if book_id is not None:
                    _update_interactively(books, book_id, infile, outfile)
            elif choice == 4:
                outfile.write("Enter index to insert: ")
                index = _read_int(infile)
                if index is not None:
                    books.insert(index, *_ask_book(infile, outfile))
            elif choice == 5:
                books.remove(_ask(infile, outfile, "Title: \n"))
            elif choice == 6:
                return
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Show a sample catalogue, let the user edit book 3, then start the menu."""
    infile, outfile = sys.stdin, sys.stdout
    books = BookList()
    books.add("Harry Potter", "JK Rowling")
    books.add("Art Of War", "Sun Tzu")
    books.add("The Republic", "Plato")
    books.add("Tao Te Ching", "Lao Tse")
    books.add("Calculus", "Sullivan")
    outfile.write(books.format() + "\n")
    books.remove("Calculus")
    outfile.write(books.format() + "\n")
    try:
        _update_interactively(books, 3, infile, outfile)
    except EOFError:
        return 0
    outfile.write(books.format())
    run_menu(books, infile, outfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())