# wanderlust/db_indexes.py

from typing import NamedTuple

from pymongo import ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.errors import CollectionInvalid, OperationFailure

from wanderlust.db import get_client, get_db, ping

NAMESPACE_EXISTS = 48


class IndexSpec(NamedTuple):
    collection: str
    keys: list
    unique: bool = False

    @property
    def name(self) -> str:
        # same naming MongoDB uses by default: field_direction joined by "_"
        return "_".join(f"{field}_{direction}" for field, direction in self.keys)


COLLECTIONS = ("users", "posts")

INDEXES = (
    # one account per email
    IndexSpec("users", [("email", ASCENDING)], unique=True),
    # newest posts first
    IndexSpec("posts", [("createdAt", DESCENDING)]),
    # posts by author
    IndexSpec("posts", [("author", ASCENDING)]),
)


# ----------------------------
# COLLECTIONS
# ----------------------------
def ensure_collections(db: Database, names=COLLECTIONS) -> list[str]:
    """Create every collection in `names` that does not exist yet.

    Returns the names that were actually created; existing collections
    are left as they are.
    """
    existing = set(db.list_collection_names())
    created = []

    for name in names:
        if name in existing:
            continue
        try:
            db.create_collection(name)
        except CollectionInvalid:
            # created by someone else since list_collection_names()
            continue
        except OperationFailure as e:
            # created by someone else after the driver's own existence check
            if e.code != NAMESPACE_EXISTS:
                raise
            continue
        created.append(name)

    return created


# ----------------------------
# INDEXES
# ----------------------------
def ensure_indexes(db: Database, specs=INDEXES) -> list[str]:
    """Declare every index in `specs`. Re-declaring an identical index is a no-op."""
    names = []
    for spec in specs:
        names.append(
            db[spec.collection].create_index(
                spec.keys, unique=spec.unique, name=spec.name
            )
        )
    return names


def describe_indexes(db: Database, names=COLLECTIONS) -> dict:
    existing = set(db.list_collection_names())
    return {
        name: db[name].index_information()
        for name in names
        if name in existing
    }


def missing_indexes(db: Database, specs=INDEXES) -> list[IndexSpec]:
    """Specs with no matching index (absent, different keys, or different uniqueness)."""
    info = describe_indexes(db, {spec.collection for spec in specs})
    missing = []

    for spec in specs:
        idx = info.get(spec.collection, {}).get(spec.name)
        if (
            idx is None
            or [tuple(k) for k in idx["key"]] != [tuple(k) for k in spec.keys]
            or bool(idx.get("unique", False)) != spec.unique
        ):
            missing.append(spec)

    return missing


def init_db(db: Database) -> dict:
    created = ensure_collections(db)
    indexes = ensure_indexes(db)
    return {
        "database": db.name,
        "created_collections": created,
        "indexes": indexes,
    }


def main() -> None:
    client = get_client()
    try:
        ping(client)

        db = get_db(client)
        print(f"[INIT] Using database: {db.name}", flush=True)

        summary = init_db(db)
        for name in summary["created_collections"]:
            print(f"[INIT] Created collection '{name}'", flush=True)
        for name in summary["indexes"]:
            print(f"[INIT] Index ensured: {name}", flush=True)

        print("Database initialized successfully!", flush=True)
    finally:
        client.close()


if __name__ == "__main__":
    main()
