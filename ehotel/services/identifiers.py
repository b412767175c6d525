from sqlalchemy.orm import Session


def find_unused_id(db: Session, model) -> int:
    """
    Next free integer id for tables whose ids are assigned by the application
    (Hotel, Room): highest existing id plus one, 1 on an empty table.

    Gaps below the maximum are not reused. Two concurrent callers can get the
    same value; the second insert then fails on the primary key.
    """
    ids = [row_id for (row_id,) in db.query(model.id).all() if row_id is not None]
    return max(ids, default=0) + 1
