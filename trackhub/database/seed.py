"""Fixed sample catalogue and the destructive reseed routine."""

from __future__ import annotations

import logging

from trackhub.database.db_manager import Track, db, reset_database


logger = logging.getLogger(__name__)

SEED_TRACKS = (
    {
        'name': 'Raabta',
        'genre': 'Romantic',
        'release_year': 2012,
        'artist': 'Arijit Singh',
        'album': 'Agent Vinod',
        'duration': 4,
    },
    {
        'name': 'Naina Da Kya Kasoor',
        'genre': 'Pop',
        'release_year': 2018,
        'artist': 'Amit Trivedi',
        'album': 'Andhadhun',
        'duration': 3,
    },
    {
        'name': 'Ghoomar',
        'genre': 'Traditional',
        'release_year': 2018,
        'artist': 'Shreya Ghoshal',
        'album': 'Padmaavat',
        'duration': 3,
    },
    {
        'name': 'Bekhayali',
        'genre': 'Rock',
        'release_year': 2019,
        'artist': 'Sachet Tandon',
        'album': 'Kabir Singh',
        'duration': 6,
    },
    {
        'name': 'Hawa Banke',
        'genre': 'Romantic',
        'release_year': 2019,
        'artist': 'Darshan Raval',
        'album': 'Hawa Banke (Single)',
        'duration': 3,
    },
    {
        'name': 'Ghungroo',
        'genre': 'Dance',
        'release_year': 2019,
        'artist': 'Arijit Singh',
        'album': 'War',
        'duration': 5,
    },
    {
        'name': 'Makhna',
        'genre': 'Hip-Hop',
        'release_year': 2019,
        'artist': 'Tanishk Bagchi',
        'album': 'Drive',
        'duration': 3,
    },
    {
        'name': 'Tera Ban Jaunga',
        'genre': 'Romantic',
        'release_year': 2019,
        'artist': 'Tulsi Kumar',
        'album': 'Kabir Singh',
        'duration': 3,
    },
    {
        'name': 'First Class',
        'genre': 'Dance',
        'release_year': 2019,
        'artist': 'Arijit Singh',
        'album': 'Kalank',
        'duration': 4,
    },
    {
        'name': 'Kalank Title Track',
        'genre': 'Romantic',
        'release_year': 2019,
        'artist': 'Arijit Singh',
        'album': 'Kalank',
        'duration': 5,
    },
)


def seed_database() -> int:
    """Reset every table and insert SEED_TRACKS in order.

    Ids are assigned sequentially from 1 because the tables are recreated.
    Returns the number of tracks inserted.
    """
    reset_database()
    try:
        db.session.add_all([Track(**record) for record in SEED_TRACKS])
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info("Seeded %s tracks", len(SEED_TRACKS))
    return len(SEED_TRACKS)


__all__ = ["SEED_TRACKS", "seed_database"]
