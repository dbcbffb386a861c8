# session_auth/adapters/outbound/persistence/repositories/user_repository.py (async version)

"""
Repository for user operations.

This module implements the repository that performs database operations
related to users, implementing the IUserRepository interface.
"""

import logging
from typing import Optional, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from session_auth.adapters.outbound.persistence.models import User
from session_auth.application.ports.outbound import IUserRepository
from session_auth.domain.models.user_domain_model import User as DomainUser, Role
from session_auth.domain.exceptions import (
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)


class AsyncUserRepository(IUserRepository):
    """
    Async SQLAlchemy implementation of the user record store.
    """

    def __init__(self, db: AsyncSession):
        """
        Args:
            db: Async database session
        """
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{type(self).__name__}")

    async def find_by_id(self, user_id: Any) -> Optional[DomainUser]:
        """
        Find a user by ID.

        Returns:
            User found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            db_obj = await self.db.get(User, user_id)
            return self.to_domain(db_obj) if db_obj else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user with ID {user_id}: {e}")
            raise DatabaseOperationException(
                detail="Error fetching user",
                original_error=e
            )

    async def find_by_email(self, email_id: str) -> Optional[DomainUser]:
        """
        Find a user by email.

        Returns:
            User found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(User).where(User.email_id == email_id)
            result = await self.db.execute(query)
            db_obj = result.scalar_one_or_none()
            return self.to_domain(db_obj) if db_obj else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user by email: {e}")
            raise DatabaseOperationException(
                detail="Error fetching user by email",
                original_error=e
            )

    async def create(self, first_name: str, email_id: str, password_hash: str, role: Role) -> DomainUser:
        """
        Create a new user whose password is already hashed.

        Raises:
            ResourceAlreadyExistsException: If the email is already in use
            DatabaseOperationException: In case of database error
        """
        db_obj = User(
            first_name=first_name,
            email_id=email_id,
            password=password_hash,
            role=Role(role).value,
        )
        try:
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            self.logger.info(f"User created with ID: {db_obj.id}")
            return self.to_domain(db_obj)

        except IntegrityError:
            # Unique email raced with another registration
            await self.db.rollback()
            raise ResourceAlreadyExistsException(detail="User with this email already exists")
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error creating user: {e}")
            raise DatabaseOperationException(
                detail="Error creating user",
                original_error=e
            )

    async def delete(self, user_id: Any) -> None:
        """
        Delete a user by ID.

        Raises:
            ResourceNotFoundException: If the user is not found
            DatabaseOperationException: In case of database error
        """
        try:
            db_obj = await self.db.get(User, user_id)
            if not db_obj:
                raise ResourceNotFoundException(
                    detail="User not found",
                    resource_id=user_id
                )

            await self.db.delete(db_obj)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error deleting user {user_id}: {e}")
            raise DatabaseOperationException(
                detail="Error deleting user",
                original_error=e
            )

    @staticmethod
    def to_domain(db_model: User) -> DomainUser:
        """
        Convert the ORM model to the domain model.
        """
        return DomainUser(
            id=db_model.id,
            first_name=db_model.first_name,
            email_id=db_model.email_id,
            password=db_model.password,
            role=Role(db_model.role),
            created_at=db_model.created_at,
            updated_at=db_model.updated_at,
        )
