"""
Record model for SurahKit datasets.
"""

from typing import Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Record(BaseModel):
    """One surah entry of a language partition.

    The published datasets use ``surah``/``verses``/``text``; the
    ``title``/``verseCount``/``body`` spellings are accepted as well.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    id: str
    title: str = Field(validation_alias=AliasChoices("surah", "title"))
    verse_count: Union[int, str] = Field(
        validation_alias=AliasChoices("verses", "verseCount", "verse_count")
    )
    body: str = Field(validation_alias=AliasChoices("text", "body"))


# A resolved partition, in source order.
Partition = Tuple[Record, ...]
