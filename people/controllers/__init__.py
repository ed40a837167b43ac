from people.controllers.people_controller import PeopleController, PersonRow

__all__ = ["PeopleController", "PersonRow"]
