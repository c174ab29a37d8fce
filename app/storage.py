from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy import insert, select

from .db import Board, BoardList, BoardUser, Card, CardUser, Database, User

logger = logging.getLogger(__name__)


class Storage:
    """Statements behind every endpoint, run against an injected database."""

    def __init__(self, db: Database) -> None:
        self.db = db

    # === User operations ===
    async def list_users(self) -> List[dict]:
        return await self.db.execute(select(User.id, User.name, User.email))

    async def create_user(self, name: str, email: str) -> dict:
        rows = await self.db.execute(
            insert(User).values(name=name, email=email).returning(User.id, User.name, User.email)
        )
        logger.info("user %s created", rows[0]["id"])
        return rows[0]

    # === Board operations ===
    async def list_boards(self) -> List[dict]:
        stmt = (
            select(Board.id, Board.name, BoardUser.user_id.label("adminUserId"))
            .join(BoardUser, BoardUser.board_id == Board.id)
            .where(BoardUser.is_admin.is_(True))
        )
        return await self.db.execute(stmt)

    async def create_board(self, name: str, admin_user_id: str) -> dict:
        async with self.db.transaction() as conn:
            result = await conn.execute(insert(Board).values(name=name).returning(Board.id, Board.name))
            board = dict(result.mappings().one())
            await conn.execute(
                insert(BoardUser).values(board_id=board["id"], user_id=admin_user_id, is_admin=True)
            )
        logger.info("board %s created with admin %s", board["id"], admin_user_id)
        return board

    # === List operations ===
    async def create_list(self, name: str, board_id: str) -> dict:
        rows = await self.db.execute(
            insert(BoardList)
            .values(name=name, board_id=board_id)
            .returning(BoardList.id, BoardList.name, BoardList.board_id.label("boardId"))
        )
        logger.info("list %s created on board %s", rows[0]["id"], board_id)
        return rows[0]

    async def lists_for_board(self, board_id: str) -> List[dict]:
        stmt = (
            select(BoardList.id, BoardList.name)
            .where(BoardList.board_id == board_id)
            .order_by(BoardList.created_at, BoardList.id)
        )
        return await self.db.execute(stmt)

    # === Card operations ===
    async def create_card(
        self,
        title: str,
        description: str,
        due_date: date,
        list_id: str,
        owner_user_id: str,
    ) -> dict:
        async with self.db.transaction() as conn:
            result = await conn.execute(
                insert(Card)
                .values(title=title, description=description, due_date=due_date, list_id=list_id)
                .returning(Card.id, Card.title, Card.description, Card.due_date, Card.list_id)
            )
            card = dict(result.mappings().one())
            await conn.execute(
                insert(CardUser).values(card_id=card["id"], user_id=owner_user_id, is_owner=True)
            )
        logger.info("card %s created on list %s", card["id"], list_id)
        return card

    async def add_member(self, card_id: str, user_id: str) -> dict:
        rows = await self.db.execute(
            insert(CardUser)
            .values(card_id=card_id, user_id=user_id, is_owner=False)
            .returning(
                CardUser.id,
                CardUser.card_id.label("cardId"),
                CardUser.user_id.label("userId"),
                CardUser.is_owner.label("isOwner"),
            )
        )
        return rows[0]

    async def cards_for_list(self, list_id: str) -> List[dict]:
        stmt = (
            select(
                Card.id,
                Card.title,
                Card.description,
                Card.due_date,
                User.name.label("ownerUsername"),
            )
            .join(CardUser, CardUser.card_id == Card.id)
            .join(User, User.id == CardUser.user_id)
            .where(Card.list_id == list_id, CardUser.is_owner.is_(True))
            .order_by(Card.created_at, Card.id)
        )
        return await self.db.execute(stmt)
