"""ORM metadata root: db.base.Base, with constraint naming shared by models and migrations."""
