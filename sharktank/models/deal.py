"""
Model: Deal
Table: DYNAMODB_TABLE (partition key: id)

A pitch shown on the program, closed or not. The table stores the
composite id 'season#episode#company'; season, episode and company are
never stored on their own and are recovered by splitting the id.
"""

# Python Packages
from dataclasses import asdict, dataclass, field, fields
from typing import List, Optional, Tuple

# Constants
from ..base import constants

# Exceptions
from ..util.exceptions import MalformedDealIdError





def compose_deal_id(season, episode, company) -> str:
    """ Build the table key, e.g. (5, 2, 'Acme') -> '5#2#Acme'... """

    return constants.DEAL_ID_SEPARATOR.join([str(season), str(episode), str(company)])



def parse_deal_id(deal_id: str) -> Tuple[int, int, str]:
    """
    Split a composite deal id back into its parts

    Args:
        deal_id (str): 'season#episode#company'

    Returns:
        tuple: (season, episode, company)

    Raises:
        MalformedDealIdError: not exactly two separators, or season/episode
            not integers
    """

    if not isinstance(deal_id, str):
        raise MalformedDealIdError(deal_id)

    parts = deal_id.split(constants.DEAL_ID_SEPARATOR)
    if len(parts) != 3:
        raise MalformedDealIdError(deal_id)

    season, episode, company = parts
    try:
        return int(season), int(episode), company

    except ValueError:
        raise MalformedDealIdError(deal_id)





@dataclass
class Deal:
    """ A deal record as the catalog works with it... """

    id: str
    season: int
    episode: int
    company: str
    category: str = constants.DEAL_DEFAULT_CATEGORY
    closed_deal: bool = False
    participants: List[str] = field(default_factory = list)
    investors: List[str] = field(default_factory = list)
    amount_requested: Optional[float] = None
    equity_offered: Optional[float] = None
    amount_negotiated: Optional[float] = None
    equity_negotiated: Optional[float] = None
    proposal_type: str = constants.DEAL_DEFAULT_PROPOSAL_TYPE
    description: str = ""


    @classmethod
    def from_raw(cls, item: dict) -> "Deal":
        """
        Build a Deal from a raw table/API item

        The item carries only 'id' for the key parts; season, episode and
        company are parsed from it. Absent optional fields get their defaults.
        """

        deal_id = item.get("id")
        season, episode, company = parse_deal_id(deal_id)

        return cls(
            id = deal_id,
            season = season,
            episode = episode,
            company = company,
            category = or_default(item.get("category"), constants.DEAL_DEFAULT_CATEGORY),
            closed_deal = bool(item.get("closed_deal")),
            participants = list(item.get("participants") or []),
            investors = list(item.get("investors") or []),
            amount_requested = item.get("amount_requested"),
            equity_offered = item.get("equity_offered"),
            amount_negotiated = item.get("amount_negotiated"),
            equity_negotiated = item.get("equity_negotiated"),
            proposal_type = or_default(item.get("proposal_type"), constants.DEAL_DEFAULT_PROPOSAL_TYPE),
            description = item.get("description") or ""
        )


    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]


    def to_dict(self) -> dict:
        return asdict(self)


    def __repr__(self):
        return f"<Deal {self.id}>"



def or_default(value, default):
    return default if value is None else value
