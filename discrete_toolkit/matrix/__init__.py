"""Matrix package: immutable labelled 0/1 matrices and boolean closure."""

__all__ = ["matrix", "operations"]
