from typing import Any, Optional


def to_global_id(resource: str, numeric_id: int) -> str:
    return f'gid://shopify/{resource}/{numeric_id}'


def from_global_id(global_id: Any) -> Optional[int]:
    """`gid://shopify/Product/123` -> 123; numeric ids pass through"""
    if global_id is None:
        return None
    if isinstance(global_id, int):
        return global_id
    tail = str(global_id).rsplit('/', 1)[-1].split('?', 1)[0]
    return int(tail) if tail.isdigit() else None
