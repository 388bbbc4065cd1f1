from contextlib import contextmanager
from functools import wraps
from sqlalchemy.orm import Session
import logging

logger = logging.getLogger(__name__)


@contextmanager
def transaction(db: Session, name: str):
    """
    Commit à la sortie du bloc, rollback si une exception le traverse.
    L'exception est toujours propagée (les HTTPException métier comprises).
    """
    try:
        yield db
        db.commit()
        logger.debug(f"Transaction committed in {name}")
    except Exception as e:
        db.rollback()
        logger.warning(f"Transaction rolled back in {name}: {e}")
        raise


def transactional(func):
    """
    Décorateur des méthodes de service qui écrivent (self.db requis) :
    verrous, écriture de la bouteille et de son événement tiennent
    dans une seule transaction.
    """

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        with transaction(self.db, func.__qualname__):
            return func(self, *args, **kwargs)

    return wrapper
