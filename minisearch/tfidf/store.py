"""
Append-only document store.

Documents get dense, zero-based ids in insertion order. Ids are only ever
produced here, so looking up an id outside [0, count) is a programming error.
"""

from dataclasses import dataclass
from typing import Iterator, List


class DocumentNotFoundError(IndexError):
    """Document id was never issued by this store"""

    def __init__(self, doc_id: int, count: int):
        super().__init__(f"Document id {doc_id} out of range (store holds {count} documents)")
        self.doc_id = doc_id
        self.count = count


@dataclass(frozen=True)
class Document:
    """Indexed document. Immutable once inserted."""
    id: int
    title: str
    content: str
    url: str = ""  # Empty string = no URL


class DocumentStore:
    """Ordered collection of documents addressed by id"""

    def __init__(self):
        self._documents: List[Document] = []

    def insert(self, title: str, content: str, url: str = "") -> int:
        """
        Append a document and return its id (the previous count).
        """
        doc_id = len(self._documents)
        self._documents.append(Document(id=doc_id, title=title, content=content, url=url))
        return doc_id

    def get(self, doc_id: int) -> Document:
        """
        Fetch a document by id.

        Raises:
            DocumentNotFoundError: If doc_id is not in [0, count)
        """
        # Negative ids must not wrap around like list indexing does
        if not 0 <= doc_id < len(self._documents):
            raise DocumentNotFoundError(doc_id, len(self._documents))
        return self._documents[doc_id]

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)
