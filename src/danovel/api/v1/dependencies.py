"""Shared API dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from danovel.db.session import get_db

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]
