from ._batch import BatchLike, IRowSelectable

__all__ = ["BatchLike", "IRowSelectable"]
