"""Tagged person records and the variant filter over them."""

from ticklist.persons.filtering import filter_persons
from ticklist.persons.models import Admin, Person, User
from ticklist.persons.seed import default_persons, describe_person

__all__ = ["Admin", "Person", "User", "default_persons", "describe_person", "filter_persons"]
