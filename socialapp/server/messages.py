"""Request and response types of the social service.

Every operation has one request and one response. A response either
carries its payload with success=True, or success=False together with the
error kind (DuplicateIdentifier, UnknownIdentifier, ...) and a message.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Response:
    success: bool = True
    error_kind: str = ""
    error_message: str = ""


# People

@dataclass
class RegisterPersonRequest:
    code: str
    name: str
    surname: str

@dataclass
class RegisterPersonResponse(Response):
    pass

@dataclass
class GetPersonInfoRequest:
    code: str

@dataclass
class GetPersonInfoResponse(Response):
    info: str = ""

@dataclass
class SearchPersonsRequest:
    query: str

@dataclass
class SearchPersonsResponse(Response):
    codes: List[str] = field(default_factory=list)


# Friendships

@dataclass
class AddFriendshipRequest:
    code_a: str
    code_b: str

@dataclass
class AddFriendshipResponse(Response):
    created: bool = False

@dataclass
class ListFriendsRequest:
    code: str

@dataclass
class ListFriendsResponse(Response):
    codes: List[str] = field(default_factory=list)

@dataclass
class FriendsOfFriendsRequest:
    code: str
    distinct: bool = False

@dataclass
class FriendsOfFriendsResponse(Response):
    codes: List[str] = field(default_factory=list)


# Groups

@dataclass
class CreateGroupRequest:
    group_name: str

@dataclass
class CreateGroupResponse(Response):
    created: bool = False

@dataclass
class AddPersonToGroupRequest:
    code: str
    group_name: str

@dataclass
class AddPersonToGroupResponse(Response):
    added: bool = False

@dataclass
class ListGroupMembersRequest:
    group_name: str

@dataclass
class ListGroupMembersResponse(Response):
    codes: List[str] = field(default_factory=list)

@dataclass
class ListGroupsRequest:
    pass

@dataclass
class ListGroupsResponse(Response):
    names: List[str] = field(default_factory=list)

@dataclass
class ListPersonGroupsRequest:
    code: str

@dataclass
class ListPersonGroupsResponse(Response):
    names: List[str] = field(default_factory=list)


# Rankings

RANKING_METRICS = (
    "most_friends",
    "most_friends_of_friends",
    "largest_group",
    "most_groups",
)

@dataclass
class RankingRequest:
    metric: str

@dataclass
class RankingResponse(Response):
    winner: Optional[str] = None


# Posts

@dataclass
class CreatePostRequest:
    author_code: str
    text: str
    timestamp: Optional[int] = None

@dataclass
class CreatePostResponse(Response):
    post_id: str = ""

@dataclass
class GetPostRequest:
    author_code: str
    post_id: str

@dataclass
class GetPostResponse(Response):
    text: str = ""
    timestamp: int = 0

@dataclass
class PaginatedPostsRequest:
    author_code: str
    page_number: int
    page_size: int

@dataclass
class PaginatedPostsResponse(Response):
    post_ids: List[str] = field(default_factory=list)
