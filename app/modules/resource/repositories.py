from typing import Optional

from app.modules.resource.models import Resource, Title, TitleType
from core.repositories.BaseRepository import BaseRepository


class ResourceRepository(BaseRepository):
    def __init__(self):
        super().__init__(Resource)

    def _doi_query(self, doi: str, exclude_id: Optional[int] = None):
        # Exact, case-sensitive comparison on the stored DOI
        query = self.model.query.filter(self.model.doi == doi)
        if exclude_id is not None:
            query = query.filter(self.model.id != exclude_id)
        return query

    def find_by_doi(self, doi: str, exclude_id: Optional[int] = None) -> Optional[Resource]:
        return self._doi_query(doi, exclude_id).order_by(self.model.id).first()

    def exists_by_doi(self, doi: str, exclude_id: Optional[int] = None) -> bool:
        return self.session.query(self._doi_query(doi, exclude_id).exists()).scalar()

    def find_max_doi(self) -> Optional[str]:
        resource = (
            self.model.query.filter(self.model.doi.isnot(None)).order_by(self.model.doi.desc()).first()
        )
        return resource.doi if resource else None


class TitleTypeRepository(BaseRepository):
    def __init__(self):
        super().__init__(TitleType)

    def get_by_slug(self, slug: str) -> Optional[TitleType]:
        return self.model.query.filter_by(slug=slug).first()

    def get_or_create(self, slug: str, name: str) -> TitleType:
        title_type = self.get_by_slug(slug)
        if title_type is None:
            title_type = self.create(slug=slug, name=name)
        return title_type


class TitleRepository(BaseRepository):
    def __init__(self):
        super().__init__(Title)
