"""Ordered collection of the patches parsed from a diff."""

from typing import Iterable, Iterator, List, overload

from gitdiff.gitdiff_patch import Patch


class Patches:
    """
    Patches in the order their sections appear in the source diff.

    The collection is read-only to callers: it can be iterated, indexed and
    searched, but patches are only added while it is being built.
    """

    def __init__(self, patches: Iterable[Patch] = ()) -> None:
        """
        Initialize the collection.

        Args:
            patches: Patches in source order
        """
        self._patches: List[Patch] = list(patches)

    @classmethod
    def of(cls, *patches: Patch) -> 'Patches':
        """
        Build a collection from individual patches.

        Args:
            *patches: Patches in source order

        Returns:
            The new collection
        """
        return cls(patches)

    def _append(self, patch: Patch) -> None:
        self._patches.append(patch)

    def __iter__(self) -> Iterator[Patch]:
        return iter(self._patches)

    def __len__(self) -> int:
        return len(self._patches)

    @overload
    def __getitem__(self, index: int) -> Patch: ...

    @overload
    def __getitem__(self, index: slice) -> List[Patch]: ...

    def __getitem__(self, index: int | slice) -> Patch | List[Patch]:
        return self._patches[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patches):
            return NotImplemented

        return self._patches == other._patches

    def __repr__(self) -> str:
        return f"Patches({self._patches!r})"

    def files(self) -> List[str]:
        """
        Get the file path of every patch.

        Returns:
            Paths in collection order; may contain empty strings
        """
        return [patch.file for patch in self._patches]

    def secure_hashes(self) -> List[str | None]:
        """
        Get the secure hash of every patch.

        Returns:
            Hashes in collection order; None where no hash was supplied
        """
        return [patch.secure_hash for patch in self._patches]

    def find_patch_by_file(self, file: str) -> Patch | None:
        """
        Find the first patch for a file.

        Args:
            file: File path

        Returns:
            The first matching patch, or None
        """
        for patch in self._patches:
            if patch.file == file:
                return patch

        return None

    def find_patch_by_secure_hash(self, secure_hash: str) -> Patch | None:
        """
        Find the first patch carrying a secure hash.

        Args:
            secure_hash: Commit or content identifier

        Returns:
            The first matching patch, or None
        """
        for patch in self._patches:
            if patch.secure_hash == secure_hash:
                return patch

        return None
