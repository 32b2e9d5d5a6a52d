from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

@dataclass(frozen=True)
class Post:
    """Represents a post published by a person.

    Posts are immutable once created. The serial is drawn from the
    graph-wide counter, so it orders posts across all authors.

    Attributes:
        serial (int): Globally unique, strictly increasing post number
        author_code (str): Account code of the person who wrote the post
        text (str): Content of the post
        timestamp (int): Creation time in milliseconds (or injected logical time)
    """
    serial: int
    author_code: str
    text: str
    timestamp: int

    @property
    def post_id(self) -> str:
        """Opaque identifier handed out to callers."""
        return str(self.serial)

@dataclass
class Person:
    """Represents a person registered in the social graph.

    Friends are kept as account codes rather than Person references,
    so two friends never point at each other directly.

    Attributes:
        code (str): Unique account code (primary key)
        name (str): First name
        surname (str): Last name
        friend_codes (Set[str]): Account codes of direct friends
        posts (Dict[int, Post]): Posts written by this person, keyed by serial
    """
    code: str
    name: str
    surname: str
    friend_codes: Set[str] = field(default_factory=set)
    posts: Dict[int, Post] = field(default_factory=dict)

    @property
    def friend_count(self) -> int:
        return len(self.friend_codes)

    def info(self) -> str:
        return f"{self.name} {self.surname}"

    def is_friend(self, code: str) -> bool:
        return code in self.friend_codes

    def add_friend(self, code: str) -> bool:
        """Add one side of a friendship.

        Returns:
            bool: True if the friend was added, False if already a friend
        """
        if code in self.friend_codes:
            return False
        self.friend_codes.add(code)
        return True

    def add_post(self, post: Post):
        self.posts[post.serial] = post

    def get_post(self, serial: int) -> Optional[Post]:
        return self.posts.get(serial)

    def posts_newest_first(self) -> List[Post]:
        return sorted(self.posts.values(), key=lambda p: p.serial, reverse=True)

@dataclass
class Group:
    """Represents a named group of people.

    Attributes:
        name (str): Unique group name
        member_codes (Set[str]): Account codes of the members
    """
    name: str
    member_codes: Set[str] = field(default_factory=set)

    @property
    def member_count(self) -> int:
        return len(self.member_codes)

    def is_member(self, code: str) -> bool:
        return code in self.member_codes

    def add_member(self, code: str) -> bool:
        """Add a person to the group.

        Returns:
            bool: True if the person was added, False if already a member
        """
        if code in self.member_codes:
            return False
        self.member_codes.add(code)
        return True
