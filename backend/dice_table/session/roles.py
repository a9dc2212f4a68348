from typing import Iterable, List, Tuple, Union

DEFAULT_ROLES: Tuple[str, ...] = ('建广', '建国', '李川', '凯宁', '鸿晓')


def parse_roles(value: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    """Normalize a configured role set into an ordered tuple.

    Accepts a comma separated string or any iterable of names. Blank
    entries are dropped; an empty result or a repeated name is a
    configuration error.
    """
    if value is None:
        return DEFAULT_ROLES
    if isinstance(value, str):
        items = value.split(',')
    else:
        items = list(value)
    roles: List[str] = []
    for item in items:
        name = str(item).strip()
        if not name:
            continue
        if name in roles:
            raise ValueError(f'Duplicate role in configuration: {name!r}')
        roles.append(name)
    if not roles:
        raise ValueError('At least one role must be configured')
    return tuple(roles)
