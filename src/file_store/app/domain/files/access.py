from __future__ import annotations


def can_retrieve(*, is_private: bool, authenticated: bool) -> bool:
    if not is_private:
        return True
    return authenticated
