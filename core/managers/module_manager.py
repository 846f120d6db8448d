import importlib
import logging
import os

logger = logging.getLogger(__name__)


class ModuleManager:
    def __init__(self, app):
        self.app = app
        self.modules_dir = os.path.join(app.root_path, "modules")

    def get_module_names(self):
        return sorted(
            name
            for name in os.listdir(self.modules_dir)
            if os.path.isdir(os.path.join(self.modules_dir, name))
            and os.path.exists(os.path.join(self.modules_dir, name, "__init__.py"))
        )

    def register_modules(self):
        for module_name in self.get_module_names():
            module = importlib.import_module(f"app.modules.{module_name}")
            # Import models so create_all sees every table
            if os.path.exists(os.path.join(self.modules_dir, module_name, "models.py")):
                importlib.import_module(f"app.modules.{module_name}.models")

            blueprint = getattr(module, f"{module_name}_bp", None)
            if blueprint is None:
                continue
            self.app.register_blueprint(blueprint)
            logger.debug(f"Registered blueprint for module '{blueprint.module_name}'")

    def get_seeders(self):
        from core.seeders.BaseSeeder import BaseSeeder

        seeders = []
        for module_name in self.get_module_names():
            if not os.path.exists(os.path.join(self.modules_dir, module_name, "seeders.py")):
                continue
            seeders_module = importlib.import_module(f"app.modules.{module_name}.seeders")
            for attr in vars(seeders_module).values():
                if isinstance(attr, type) and issubclass(attr, BaseSeeder) and attr is not BaseSeeder:
                    seeders.append(attr)
        return sorted(seeders, key=lambda seeder: seeder.priority)
