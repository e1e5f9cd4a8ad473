"""
Relationship Registry

FLOW OVERVIEW
- Models declare their outgoing associations as data in `__relations__`
  (tuples of Relation) and are added with @register.
- resolve() runs once, after every model module is imported. It checks each
  Relation against the mapped tables and attaches a sqlalchemy relationship()
  under Relation.name. A second call is a no-op.
- Nothing is skipped silently: an unknown target, a missing foreign key column,
  a back-reference that does not point back, or a cascade policy that disagrees
  with the foreign key's ON DELETE rule raises RelationshipResolutionError.

Cascade policies map onto the ORM as:
- CASCADE    one-to-many/one-to-one get cascade='all' with passive_deletes, the
             database removes children that are not loaded.
- SET_NULL   default cascade with passive_deletes, the database nulls the key.
- NO_ACTION  default cascade.
Many-to-many links through a mapped join entity are view-only; rows of the join
entity are written through the entity itself.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from sqlalchemy import and_
from sqlalchemy.orm import relationship

from ..utils.errors import RelationshipResolutionError

logger = logging.getLogger(__name__)


class Cardinality(str, enum.Enum):
    ONE_TO_ONE = 'one_to_one'
    ONE_TO_MANY = 'one_to_many'
    MANY_TO_ONE = 'many_to_one'
    MANY_TO_MANY = 'many_to_many'


class OnDelete(str, enum.Enum):
    CASCADE = 'CASCADE'
    SET_NULL = 'SET NULL'
    NO_ACTION = 'NO ACTION'


@dataclass(frozen=True)
class Relation:
    """
    One outgoing association of a model.

    Attributes:
        name: attribute name on the declaring model
        target: class name of the related model
        cardinality: Cardinality of the link seen from the declaring model
        foreign_key: owning foreign key column. For many_to_one it lives on the
            declaring model, for one_to_many/one_to_one on the target, for
            many_to_many on the join table (pointing at the declaring model)
        back_populates: name of the inverse Relation on the target, if any
        on_delete: policy applied when the parent row is deleted
        secondary: join table name (many_to_many only)
        secondary_key: join table column pointing at the target (many_to_many only)
        secondary_filter: extra equality conditions on join table columns
        order_by: column name on the target used to order collections
    """
    name: str
    target: str
    cardinality: Cardinality
    foreign_key: str
    back_populates: Optional[str] = None
    on_delete: OnDelete = OnDelete.CASCADE
    secondary: Optional[str] = None
    secondary_key: Optional[str] = None
    secondary_filter: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
    order_by: Optional[str] = None


class RelationshipRegistry:
    """Collects model relations and wires them into the mapper once"""

    def __init__(self):
        self._models: Dict[str, type] = {}
        self._resolved = False

    @property
    def resolved(self):
        return self._resolved

    @property
    def models(self):
        return dict(self._models)

    def register(self, model):
        """Class decorator adding a model and its __relations__"""
        name = model.__name__
        if name in self._models and self._models[name] is not model:
            raise RelationshipResolutionError(f'Model {name} registered twice')
        self._models[name] = model
        return model

    def relations_for(self, name):
        model = self._models.get(name)
        if model is None:
            raise RelationshipResolutionError(f'Unknown model {name}')
        return tuple(getattr(model, '__relations__', ()))

    def find(self, model_name, relation_name):
        for relation in self.relations_for(model_name):
            if relation.name == relation_name:
                return relation
        return None

    def resolve(self):
        """Attach every declared relation to its model"""
        if self._resolved:
            return
        for model in self._models.values():
            for relation in getattr(model, '__relations__', ()):
                self._check(model, relation)
        for model in self._models.values():
            for relation in getattr(model, '__relations__', ()):
                setattr(model, relation.name, self._build(model, relation))
        self._resolved = True
        logger.debug('Resolved relations for %d models', len(self._models))

    # Checks

    def _target(self, model, relation):
        target = self._models.get(relation.target)
        if target is None:
            raise RelationshipResolutionError(
                f'{model.__name__}.{relation.name} points at unregistered model {relation.target}'
            )
        return target

    def _column(self, table, name, owner):
        if name not in table.c:
            raise RelationshipResolutionError(f'{owner}: no column {table.name}.{name}')
        return table.c[name]

    def _check(self, model, relation):
        owner = f'{model.__name__}.{relation.name}'
        target = self._target(model, relation)

        if relation.cardinality == Cardinality.MANY_TO_MANY:
            if not relation.secondary or not relation.secondary_key:
                raise RelationshipResolutionError(f'{owner}: many_to_many needs secondary and secondary_key')
            secondary = model.metadata.tables.get(relation.secondary)
            if secondary is None:
                raise RelationshipResolutionError(f'{owner}: unknown join table {relation.secondary}')
            self._column(secondary, relation.foreign_key, owner)
            self._column(secondary, relation.secondary_key, owner)
            for column_name, _ in relation.secondary_filter:
                self._column(secondary, column_name, owner)
            return

        child = model if relation.cardinality == Cardinality.MANY_TO_ONE else target
        column = self._column(child.__table__, relation.foreign_key, owner)
        if not column.foreign_keys:
            raise RelationshipResolutionError(f'{owner}: {child.__tablename__}.{column.name} is not a foreign key')

        if relation.cardinality != Cardinality.MANY_TO_ONE:
            declared = next(iter(column.foreign_keys)).ondelete or OnDelete.NO_ACTION.value
            if declared.upper() != relation.on_delete.value:
                raise RelationshipResolutionError(
                    f'{owner}: policy {relation.on_delete.value} disagrees with ON DELETE {declared}'
                )

        if relation.back_populates:
            inverse = self.find(relation.target, relation.back_populates)
            if inverse is None or inverse.back_populates != relation.name or inverse.target != model.__name__:
                raise RelationshipResolutionError(
                    f'{owner}: {relation.target}.{relation.back_populates} does not point back'
                )

    # Wiring

    def _build(self, model, relation):
        target = self._models[relation.target]
        kwargs = {}
        if relation.back_populates:
            kwargs['back_populates'] = relation.back_populates
        if relation.order_by:
            kwargs['order_by'] = target.__table__.c[relation.order_by]

        if relation.cardinality == Cardinality.MANY_TO_ONE:
            return relationship(target, foreign_keys=[model.__table__.c[relation.foreign_key]], **kwargs)

        if relation.cardinality == Cardinality.MANY_TO_MANY:
            secondary = model.metadata.tables[relation.secondary]
            primaryjoin = model.__table__.c.id == secondary.c[relation.foreign_key]
            if relation.secondary_filter:
                primaryjoin = and_(
                    primaryjoin,
                    *[secondary.c[column] == value for column, value in relation.secondary_filter]
                )
            return relationship(
                target,
                secondary=secondary,
                primaryjoin=primaryjoin,
                secondaryjoin=target.__table__.c.id == secondary.c[relation.secondary_key],
                viewonly=True,
                **kwargs
            )

        kwargs['foreign_keys'] = [target.__table__.c[relation.foreign_key]]
        if relation.cardinality == Cardinality.ONE_TO_ONE:
            kwargs['uselist'] = False
        if relation.on_delete == OnDelete.CASCADE:
            kwargs['cascade'] = 'all'
            kwargs['passive_deletes'] = True
        elif relation.on_delete == OnDelete.SET_NULL:
            kwargs['passive_deletes'] = True
        return relationship(target, **kwargs)


# Process-wide registry used by the model modules
relations = RelationshipRegistry()
register = relations.register
