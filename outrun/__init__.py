"""Server building blocks for an endless-runner mobile game: IDs, configuration,
message encryption, storage, sessions, analytics and an HTTP front end."""

__version__ = "0.1.0"