from app.modules.resource.models import MAIN_TITLE_SLUG, Resource, Title, TitleType
from core.seeders.BaseSeeder import BaseSeeder

TITLE_TYPES = [
    (MAIN_TITLE_SLUG, "Main Title"),
    ("alternative-title", "Alternative Title"),
    ("subtitle", "Subtitle"),
    ("translated-title", "Translated Title"),
]

DEMO_RESOURCES = [
    ("10.5880/gfz.2024.001", "Seismic Survey 2024"),
    ("10.5880/gfz.2024.002", "Borehole Temperature Logs, Groß Schönebeck"),
    ("10.5880/gfz.2024.003", "Magnetotelluric Soundings across the Dead Sea Transform"),
    ("10.5880/gfz.2024.004", "GNSS Station Coordinates, Central Andes"),
    ("10.5880/gfz.2024.005", "Superconducting Gravimeter Records, Potsdam"),
    (None, "Draft: Lake Sediment Core Geochemistry"),
]


class ResourceSeeder(BaseSeeder):

    priority = 1

    def run(self):
        title_types = self.seed([TitleType(slug=slug, name=name) for slug, name in TITLE_TYPES])
        main_title_type = next(t for t in title_types if t.slug == MAIN_TITLE_SLUG)

        resources = self.seed([Resource(doi=doi, publication_year=2024) for doi, _ in DEMO_RESOURCES])

        self.seed(
            [
                Title(resource_id=resource.id, title_type_id=main_title_type.id, value=title, language="en")
                for resource, (_, title) in zip(resources, DEMO_RESOURCES)
            ]
        )
