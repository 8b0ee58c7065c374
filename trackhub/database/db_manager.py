# database/db_manager.py
import logging
import os

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import ForeignKey, UniqueConstraint
from sqlalchemy.engine import make_url
from sqlalchemy.orm import relationship

# Initialize the SQLAlchemy object
db = SQLAlchemy()
logger = logging.getLogger(__name__)


class Track(db.Model):
    __tablename__ = 'tracks'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=True)
    genre = db.Column(db.Text, nullable=True)
    release_year = db.Column(db.Integer, nullable=True)
    artist = db.Column(db.Text, nullable=True, index=True)
    album = db.Column(db.Text, nullable=True)
    duration = db.Column(db.Integer, nullable=True)  # minutes

    liked_by = relationship(
        'User',
        secondary='likes',
        back_populates='liked_tracks',
        lazy=True,
    )

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'genre': self.genre,
            'release_year': self.release_year,
            'artist': self.artist,
            'album': self.album,
            'duration': self.duration,
            'id': self.id,
        }

    def __repr__(self) -> str:
        return f"<Track {self.name} by {self.artist}>"


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    # Open record: whatever fields the client supplied, keyed by name
    attributes = db.Column(db.JSON, nullable=False, default=dict)

    liked_tracks = relationship(
        'Track',
        secondary='likes',
        back_populates='liked_by',
        lazy=True,
    )

    def to_dict(self) -> dict:
        data = dict(self.attributes or {})
        data['id'] = self.id
        return data

    def __repr__(self) -> str:
        return f"<User {self.id}>"


class Like(db.Model):
    """Join row recording that a user likes a track."""

    __tablename__ = 'likes'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column('userId', db.Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    track_id = db.Column('trackId', db.Integer, ForeignKey('tracks.id', ondelete='CASCADE'), nullable=False, index=True)

    __table_args__ = (
        UniqueConstraint('userId', 'trackId', name='uq_likes_user_track'),
    )


def reset_database():
    """Drop every table and recreate it from the current models.

    Must run inside an application context.
    """
    db.session.remove()
    db.drop_all()
    db.create_all()
    logger.info("Database tables dropped and recreated.")


def initialize_database(app):
    """Bind the SQLAlchemy extension to ``app`` and create missing tables.

    For a file-based SQLite URI the parent directory is created first.
    """
    db.init_app(app)

    url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
    if url.get_backend_name() == 'sqlite' and url.database and url.database != ':memory:':
        db_dir = os.path.dirname(url.database)
        if db_dir and not os.path.isdir(db_dir):
            os.makedirs(db_dir, exist_ok=True)
            logger.info("Created SQLite DB directory: %s", db_dir)

    with app.app_context():
        db.create_all()
        logger.info("Database tables created or already exist.")


def dispose_database(app):
    """Release pooled connections held by the app's engine."""
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    logger.info("Database connections disposed.")
