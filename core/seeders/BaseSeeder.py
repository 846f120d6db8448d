from sqlalchemy.exc import IntegrityError

from app import db


class BaseSeeder:

    priority = 10  # Default priority, lower runs first

    def __init__(self):
        self.db = db

    def run(self):
        raise NotImplementedError("The 'run' method must be implemented by the child class.")

    def seed(self, data):
        """
        Insert a list of model instances and return them with their generated ids.

        Args:
            data (list): Instances of a single model class.

        Raises:
            ValueError: If the list mixes instances of different models.
            Exception: If the insert violates an integrity constraint.
        """
        if not data:
            return []

        model = type(data[0])
        if not all(isinstance(obj, model) for obj in data):
            raise ValueError("All objects must be of the same model.")

        try:
            self.db.session.add_all(data)
            self.db.session.commit()
        except IntegrityError as e:
            self.db.session.rollback()
            raise Exception(f"Failed to insert data into `{model.__tablename__}` table. Error: {e}") from e

        return data
