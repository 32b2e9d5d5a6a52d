from typing import Dict, Optional, Iterable, List
from .models import Person, Group
from .errors import DuplicateIdentifier, UnknownIdentifier
from ..utils.logger import setup_logger

logger = setup_logger('socialapp.repo')

class PersonsRepo:
    """In-memory registry of people keyed by account code."""

    def __init__(self):
        """Initialize an empty persons repository.

        Attributes:
            persons_by_code (Dict[str, Person]): Maps account codes to people
        """
        self.persons_by_code: Dict[str, Person] = {}

    def __len__(self) -> int:
        return len(self.persons_by_code)

    def add(self, person: Person):
        """Add new person to repository.

        Args:
            person (Person): Person object to store

        Raises:
            DuplicateIdentifier: If the account code is already registered

        Side Effects:
            - Updates in-memory dictionary
            - Logs person registration
        """
        if person.code in self.persons_by_code:
            logger.warning(f"Attempt to register existing person: {person.code}")
            raise DuplicateIdentifier(f"Person {person.code} already exists")
        self.persons_by_code[person.code] = person
        logger.info(f"New person registered: {person.info()} (code: {person.code})")

    def get(self, code: str) -> Optional[Person]:
        """Get person by account code.

        Args:
            code (str): Person's account code

        Returns:
            Optional[Person]: Person object if found, None otherwise
        """
        return self.persons_by_code.get(code)

    def require(self, code: str) -> Person:
        """Get person by account code, failing if absent.

        Raises:
            UnknownIdentifier: If no person has this code
        """
        person = self.persons_by_code.get(code)
        if person is None:
            logger.warning(f"Unknown person code: {code}")
            raise UnknownIdentifier(f"Person {code} does not exist")
        return person

    def exists(self, code: str) -> bool:
        return code in self.persons_by_code

    def all(self) -> Iterable[Person]:
        """Get all persons.

        Returns:
            Iterable[Person]: Iterator of all person objects
        """
        return self.persons_by_code.values()

    def codes(self) -> List[str]:
        return sorted(self.persons_by_code)

    def find_by_name(self, query: str) -> List[Person]:
        """Find persons whose "name surname" contains query (case insensitive).

        Args:
            query (str): Substring to search for

        Returns:
            List[Person]: Matching persons ordered by account code
        """
        q = (query or "").lower()
        matched = [p for p in self.persons_by_code.values() if q in p.info().lower()]
        return sorted(matched, key=lambda p: p.code)


class GroupsRepo:
    """In-memory registry of groups and their memberships."""

    def __init__(self):
        """Initialize an empty groups repository.

        Attributes:
            groups_by_name (Dict[str, Group]): Maps group names to groups
        """
        self.groups_by_name: Dict[str, Group] = {}

    def __len__(self) -> int:
        return len(self.groups_by_name)

    def create_group(self, name: str) -> bool:
        """Create a new group.

        Creating a group whose name already exists is a silent no-op.

        Args:
            name (str): Unique name for the group

        Returns:
            bool: True if the group was created, False if it already existed

        Side Effects:
            - Creates new group in memory
            - Logs group creation
        """
        if name in self.groups_by_name:
            logger.debug(f"Group {name} already exists, nothing to create")
            return False

        self.groups_by_name[name] = Group(name=name)
        logger.info(f"New group created: {name}")
        return True

    def add_member(self, group_name: str, code: str) -> bool:
        """Add a member to an existing group.

        Args:
            group_name (str): Name of group to add member to
            code (str): Account code of the person to add

        Returns:
            bool: True if person was added, False if already a member

        Raises:
            UnknownIdentifier: If group does not exist
        """
        group = self.require(group_name)

        if not group.add_member(code):
            logger.debug(f"Person {code} already in group {group_name}")
            return False

        logger.info(f"Added person {code} to group {group_name}")
        return True

    def get_group(self, name: str) -> Optional[Group]:
        """Get a group by its name.

        Args:
            name (str): Name of group to retrieve

        Returns:
            Optional[Group]: Group object if found, None otherwise
        """
        return self.groups_by_name.get(name)

    def require(self, name: str) -> Group:
        """Get a group by its name, failing if absent.

        Raises:
            UnknownIdentifier: If group does not exist
        """
        group = self.groups_by_name.get(name)
        if group is None:
            logger.warning(f"Unknown group: {name}")
            raise UnknownIdentifier(f"Group {name} does not exist")
        return group

    def get_person_groups(self, code: str) -> List[Group]:
        """Get all groups that a person is a member of.

        Args:
            code (str): Account code of the person

        Returns:
            List[Group]: Groups where the person is a member, ordered by name
        """
        return [
            group for name, group in sorted(self.groups_by_name.items())
            if group.is_member(code)
        ]

    def exists(self, name: str) -> bool:
        return name in self.groups_by_name

    def is_member(self, group_name: str, code: str) -> bool:
        """Check if a person is a member of a specific group.

        Returns:
            bool: True if a member, False if not or if group doesn't exist
        """
        group = self.groups_by_name.get(group_name)
        return group is not None and group.is_member(code)

    def names(self) -> List[str]:
        return sorted(self.groups_by_name)

    def all(self) -> Iterable[Group]:
        return self.groups_by_name.values()
