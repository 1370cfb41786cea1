import copy
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

from chained_hashmap import config
from chained_hashmap.errors import InvalidKeyError, validate_key
from chained_hashmap.hashing import bucket_index, get_hash_function
from chained_hashmap.logger.log_types import LogEvent
from chained_hashmap.logger.logger import log_invalid_key_event, log_resize_event


class _Absent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "ABSENT"


# Returned by HashMap.get for keys that are not stored.
ABSENT = _Absent()


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value


class HashMap:
    """
    String-keyed map using separate chaining.

    With auto_resize enabled the bucket array doubles when the load factor
    goes above max_load_factor and halves (never below MINIMUM_SIZE) when it
    drops under min_load_factor. With auto_resize disabled the table keeps
    the bucket count it was created with.
    """

    MINIMUM_SIZE = config.MINIMUM_SIZE

    def __init__(
        self,
        hash_function: Optional[Union[str, Callable[[str], int]]] = None,
        num_buckets: int = config.MINIMUM_SIZE,
        auto_resize: bool = True,
        max_load_factor: float = config.MAXIMUM_LOAD_FACTOR,
        min_load_factor: float = config.MINIMUM_LOAD_FACTOR,
        resize_factor: int = config.RESIZE_FACTOR,
    ) -> None:
        if isinstance(num_buckets, bool) or not isinstance(num_buckets, int) or num_buckets < self.MINIMUM_SIZE:
            raise ValueError(f"num_buckets must be an integer >= {self.MINIMUM_SIZE}, got {num_buckets!r}")
        if not 0 < min_load_factor < max_load_factor:
            raise ValueError(
                f"Load factor limits must satisfy 0 < min < max, got min={min_load_factor}, max={max_load_factor}"
            )
        if not isinstance(resize_factor, int) or resize_factor < 2:
            raise ValueError(f"resize_factor must be an integer >= 2, got {resize_factor!r}")

        if hash_function is None or isinstance(hash_function, str):
            self._hash = get_hash_function(config.DEFAULT_HASH if hash_function is None else hash_function)
        else:
            self._hash = hash_function

        self._auto_resize = auto_resize
        self._max_load_factor = max_load_factor
        self._min_load_factor = min_load_factor
        self._resize_factor = resize_factor

        self._bucket_count = num_buckets
        self._element_count = 0
        self._buckets: List[List[_Entry]] = [[] for _ in range(self._bucket_count)]

    def _validate(self, key, operation: str) -> None:
        try:
            validate_key(key)
        except InvalidKeyError:
            log_invalid_key_event(operation, key)
            raise

    def _bucket_index(self, key: str) -> int:
        return bucket_index(self._hash(key), self._bucket_count)

    def _find_entry(self, key: str) -> Tuple[List[_Entry], int]:
        bucket = self._buckets[self._bucket_index(key)]
        for i, entry in enumerate(bucket):
            if entry.key == key:
                return bucket, i
        return bucket, -1

    def _next_bucket_count(self) -> int:
        load_factor = self._element_count / self._bucket_count

        if load_factor > self._max_load_factor:
            return self._bucket_count * self._resize_factor
        if load_factor < self._min_load_factor:
            return max(self.MINIMUM_SIZE, self._bucket_count // self._resize_factor)
        return self._bucket_count

    def _resize(self) -> None:
        if not self._auto_resize:
            return

        new_count = self._next_bucket_count()
        if new_count == self._bucket_count:
            return

        old_count = self._bucket_count
        old_buckets = self._buckets
        self._bucket_count = new_count
        self._buckets = [[] for _ in range(new_count)]

        for bucket in old_buckets:
            for entry in bucket:
                self._buckets[self._bucket_index(entry.key)].append(entry)

        event = LogEvent.TABLE_GREW if new_count > old_count else LogEvent.TABLE_SHRANK
        log_resize_event(event, old_count, new_count, self._element_count)

    def put(self, key: str, value: Any) -> None:
        """Insert key, or overwrite its value when already stored."""
        self._validate(key, "put")
        bucket, i = self._find_entry(key)

        if i != -1:
            bucket[i].value = value
            return

        bucket.append(_Entry(key, value))
        self._element_count += 1
        self._resize()

    def get(self, key: str, default: Any = ABSENT) -> Any:
        """Return the value stored for key, or default (ABSENT) when missing."""
        self._validate(key, "get")
        bucket, i = self._find_entry(key)
        if i == -1:
            return default
        return bucket[i].value

    def has(self, key: str) -> bool:
        self._validate(key, "has")
        return self._find_entry(key)[1] != -1

    def delete(self, key: str) -> bool:
        """Remove key. Returns False when the key was not stored."""
        self._validate(key, "delete")
        bucket, i = self._find_entry(key)

        if i == -1:
            return False

        del bucket[i]
        self._element_count -= 1
        self._resize()
        return True

    @property
    def size(self) -> int:
        return self._element_count

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    @property
    def load_factor(self) -> float:
        return self._element_count / self._bucket_count

    @property
    def buckets(self) -> List[List[Tuple[str, Any]]]:
        """Deep copy of the bucket array; changing it never touches the map."""
        return [
            [(entry.key, copy.deepcopy(entry.value)) for entry in bucket]
            for bucket in self._buckets
        ]

    def items(self) -> List[Tuple[str, Any]]:
        """Pairs in bucket order, then chain order, taken when called."""
        return [(entry.key, entry.value) for bucket in self._buckets for entry in bucket]

    def keys(self) -> List[str]:
        return [key for key, _ in self.items()]

    def values(self) -> List[Any]:
        return [value for _, value in self.items()]

    def __len__(self) -> int:
        return self._element_count

    def __contains__(self, key) -> bool:
        return self.has(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __getitem__(self, key: str) -> Any:
        self._validate(key, "get")
        bucket, i = self._find_entry(key)
        if i == -1:
            raise KeyError(key)
        return bucket[i].value

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap({{{pairs}}})"
