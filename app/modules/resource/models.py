from datetime import datetime, timezone

from app import db

MAIN_TITLE_SLUG = "main-title"


class TitleType(db.Model):
    __tablename__ = "title_types"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    # DataCite titleType value
    slug = db.Column(db.String(255), unique=True, nullable=False)

    def __repr__(self):
        return f"<TitleType {self.slug}>"


class Title(db.Model):
    __tablename__ = "titles"

    id = db.Column(db.Integer, primary_key=True)
    resource_id = db.Column(db.Integer, db.ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True)
    title_type_id = db.Column(db.Integer, db.ForeignKey("title_types.id"), nullable=True)
    value = db.Column(db.String(1000), nullable=False)
    language = db.Column(db.String(10), nullable=True)

    title_type = db.relationship("TitleType")

    def __repr__(self):
        return f"<Title {self.value!r}>"


class Resource(db.Model):
    __tablename__ = "resources"

    id = db.Column(db.Integer, primary_key=True)
    # Drafts have no DOI yet; assigned DOIs are unique across all resources
    doi = db.Column(db.String(255), unique=True, nullable=True)
    identifier_type = db.Column(db.String(50), nullable=False, default="DOI")
    publication_year = db.Column(db.SmallInteger, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(
        db.DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    titles = db.relationship("Title", backref="resource", lazy=True, cascade="all, delete-orphan")

    def main_title(self):
        for title in self.titles:
            if title.title_type is not None and title.title_type.slug == MAIN_TITLE_SLUG:
                return title.value
        return None

    def __repr__(self):
        return f"<Resource {self.id} doi={self.doi}>"
