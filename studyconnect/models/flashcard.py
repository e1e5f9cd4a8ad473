"""
Flashcard Models

FLOW OVERVIEW
- FlashcardDeck: a user's deck, optionally tied to a Subject (set null when the
  subject goes away). card_count and mastery are denormalized counters.
- FlashcardCard: question/answer pair inside a deck.
  • Inserting a card bumps the deck's card_count.
  • Deleting a card lowers card_count (never below zero) and recomputes mastery.
  Both are done with UPDATE statements on the flush connection, so a deck
  instance already loaded in the session must be refreshed to see them.
- SharedFlashcardDeck: a deck shared with another user, unique per pair.
- UserCardProgress: per-user review state of a card, unique per (user, card).
"""

from datetime import datetime

from sqlalchemy import case, event, false, func, select, text, update
from sqlalchemy.orm import validates

from .base import BaseModel
from .database import db
from .registry import Cardinality as C, Relation, register
from ..utils.validators import require


def _mastery_percent(mastered, total):
    if not total:
        return 0
    return int(round(mastered * 100.0 / total))


@register
class FlashcardDeck(BaseModel, db.Model):
    __tablename__ = 'flashcard_decks'

    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    subject = db.Column(db.String(100))  # free-text label
    subject_id = db.Column(db.Uuid, db.ForeignKey('subjects.id', ondelete='SET NULL'))
    card_count = db.Column(db.Integer, default=0, server_default=text('0'))
    last_studied = db.Column(db.DateTime)
    mastery = db.Column(db.Integer, default=0, server_default=text('0'))  # percent
    is_public = db.Column(db.Boolean, default=False, server_default=false())
    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    __relations__ = (
        Relation('owner', 'User', C.MANY_TO_ONE, 'user_id', back_populates='flashcard_decks'),
        Relation('subject_detail', 'Subject', C.MANY_TO_ONE, 'subject_id', back_populates='flashcard_decks'),
        Relation('cards', 'FlashcardCard', C.ONE_TO_MANY, 'deck_id', back_populates='deck',
                 order_by='created_at'),
        Relation('shares', 'SharedFlashcardDeck', C.ONE_TO_MANY, 'deck_id', back_populates='deck'),
        Relation('shared_with_users', 'User', C.MANY_TO_MANY, 'deck_id',
                 secondary='shared_flashcard_decks', secondary_key='shared_with_id'),
        Relation('progress', 'UserCardProgress', C.ONE_TO_MANY, 'deck_id', back_populates='deck'),
    )

    @validates('title')
    def _validate_title(self, key, value):
        return require(key, value, 'Deck title is required')

    def calculate_mastery(self):
        """
        Recompute card_count and mastery from the deck's cards.

        Returns:
            int: rounded percentage of mastered cards, 0 for an empty deck
        """
        total, mastered = db.session.execute(
            select(
                func.count(FlashcardCard.id),
                func.coalesce(func.sum(case((FlashcardCard.mastered.is_(True), 1), else_=0)), 0),
            ).where(FlashcardCard.deck_id == self.id)
        ).one()
        self.card_count = total
        self.mastery = _mastery_percent(mastered, total)
        return self.mastery


@register
class FlashcardCard(BaseModel, db.Model):
    __tablename__ = 'flashcard_cards'

    question = db.Column(db.Text, nullable=False)
    answer = db.Column(db.Text, nullable=False)
    mastered = db.Column(db.Boolean, default=False, server_default=false())
    last_reviewed = db.Column(db.DateTime)
    review_count = db.Column(db.Integer, default=0, server_default=text('0'))
    deck_id = db.Column(db.Uuid, db.ForeignKey('flashcard_decks.id', ondelete='CASCADE'), nullable=False)

    __relations__ = (
        Relation('deck', 'FlashcardDeck', C.MANY_TO_ONE, 'deck_id', back_populates='cards'),
        Relation('progress', 'UserCardProgress', C.ONE_TO_MANY, 'card_id', back_populates='card'),
    )

    @validates('question')
    def _validate_question(self, key, value):
        return require(key, value, 'Question is required')

    @validates('answer')
    def _validate_answer(self, key, value):
        return require(key, value, 'Answer is required')

    def mark_reviewed(self, was_mastered):
        """Record a review of this card and refresh the deck's mastery"""
        now = datetime.utcnow()
        self.last_reviewed = now
        self.review_count = (self.review_count or 0) + 1
        self.mastered = bool(was_mastered)
        db.session.flush()

        deck = db.session.get(FlashcardDeck, self.deck_id)
        if deck is not None:
            deck.calculate_mastery()
            deck.last_studied = now
        return self


@event.listens_for(FlashcardCard, 'after_insert')
def _count_inserted_card(mapper, connection, card):
    decks = FlashcardDeck.__table__
    connection.execute(
        update(decks)
        .where(decks.c.id == card.deck_id)
        .values(card_count=func.coalesce(decks.c.card_count, 0) + 1)
    )


@event.listens_for(FlashcardCard, 'after_delete')
def _count_deleted_card(mapper, connection, card):
    decks = FlashcardDeck.__table__
    cards = FlashcardCard.__table__
    total, mastered = connection.execute(
        select(
            func.count(cards.c.id),
            func.coalesce(func.sum(case((cards.c.mastered.is_(True), 1), else_=0)), 0),
        ).where(cards.c.deck_id == card.deck_id)
    ).one()
    connection.execute(
        update(decks)
        .where(decks.c.id == card.deck_id)
        .values(
            card_count=case((decks.c.card_count > 0, decks.c.card_count - 1), else_=0),
            mastery=_mastery_percent(mastered, total),
        )
    )


@register
class SharedFlashcardDeck(BaseModel, db.Model):
    __tablename__ = 'shared_flashcard_decks'

    deck_id = db.Column(db.Uuid, db.ForeignKey('flashcard_decks.id', ondelete='CASCADE'), nullable=False)
    shared_with_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    shared_by_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    can_edit = db.Column(db.Boolean, default=False, server_default=false())
    sharing_token = db.Column(db.String(255))

    __table_args__ = (
        db.UniqueConstraint('deck_id', 'shared_with_id', name='unique_shared_deck'),
    )

    __relations__ = (
        Relation('deck', 'FlashcardDeck', C.MANY_TO_ONE, 'deck_id', back_populates='shares'),
        Relation('shared_with', 'User', C.MANY_TO_ONE, 'shared_with_id', back_populates='shared_decks_received'),
        Relation('shared_by', 'User', C.MANY_TO_ONE, 'shared_by_id', back_populates='shared_decks_sent'),
    )


@register
class UserCardProgress(BaseModel, db.Model):
    __tablename__ = 'user_card_progress'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    card_id = db.Column(db.Uuid, db.ForeignKey('flashcard_cards.id', ondelete='CASCADE'), nullable=False)
    deck_id = db.Column(db.Uuid, db.ForeignKey('flashcard_decks.id', ondelete='CASCADE'), nullable=False)
    mastered = db.Column(db.Boolean, default=False, server_default=false())
    last_reviewed = db.Column(db.DateTime)
    review_count = db.Column(db.Integer, default=0, server_default=text('0'))

    __table_args__ = (
        db.Index('user_card_progress_user_card_unique', 'user_id', 'card_id', unique=True),
    )

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='card_progress'),
        Relation('card', 'FlashcardCard', C.MANY_TO_ONE, 'card_id', back_populates='progress'),
        Relation('deck', 'FlashcardDeck', C.MANY_TO_ONE, 'deck_id', back_populates='progress'),
    )
