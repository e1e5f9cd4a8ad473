"""
Subject Catalogue Seeder
"""

import logging

from ..models import Subject

logger = logging.getLogger(__name__)

name = 'subjects'

# (name, category, description, icon)
CATALOGUE = [
    ('Mathematics', 'Science', 'The study of numbers, quantities, and shapes', 'math-icon.svg'),
    ('Physics', 'Science', 'The study of matter, energy, and the interactions between them', 'physics-icon.svg'),
    ('Chemistry', 'Science', 'The study of substances, their properties, and reactions', 'chemistry-icon.svg'),
    ('Biology', 'Science', 'The study of living organisms and their interactions', 'biology-icon.svg'),
    ('Computer Science', 'Technology', 'The study of computers and computational systems', 'cs-icon.svg'),
    ('History', 'Humanities', 'The study of past events', 'history-icon.svg'),
    ('Literature', 'Humanities', 'The study of written works', 'literature-icon.svg'),
    ('Economics', 'Social Sciences', 'The study of how people use resources', 'economics-icon.svg'),
    ('Psychology', 'Social Sciences', 'The study of the mind and behavior', 'psychology-icon.svg'),
    ('Art', 'Arts', 'The study of visual arts', 'art-icon.svg'),
    ('Other', 'Other', 'Other subjects', 'other-icon.svg'),
]


def up(session):
    subjects = [
        Subject(name=subject_name, category=category, description=description, icon=icon)
        for subject_name, category, description, icon in CATALOGUE
    ]
    session.add_all(subjects)
    session.flush()
    logger.info('Created %d subjects', len(subjects))
    return subjects


def down(session):
    names = [entry[0] for entry in CATALOGUE]
    deleted = Subject.query.filter(Subject.name.in_(names)).delete(synchronize_session=False)
    logger.info('Removed %d subjects', deleted)
    return deleted
