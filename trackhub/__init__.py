"""TrackHub: tracks, users and likes over a small JSON API."""
