"""Common first names used by the single-word person-token heuristic.

Lowercase ASCII only. Names that double as everyday English words ("will",
"mark", "hope", "grace", "june" ...) are left out so they keep counting as
topics.
"""

from __future__ import annotations

COMMON_FIRST_NAMES: frozenset[str] = frozenset(
    {
        # Masculine
        "aaron", "adam", "adrian", "alan", "albert", "alex", "alexander", "andre",
        "andrew", "andy", "anthony", "arthur", "austin", "benjamin", "bernie",
        "blake", "brad", "bradley", "brandon", "brendan", "brian", "bruce",
        "bryan", "caleb", "cameron", "carl", "carlos", "charles", "charlie",
        "chris", "christian", "christopher", "cody", "colin", "connor", "craig",
        "daniel", "danny", "darren", "dave", "david", "dennis", "derek", "diego",
        "dominic", "donald", "douglas", "dylan", "eddie", "edward", "elijah",
        "elon", "eric", "ethan", "evan", "felix", "gabriel", "gary", "george",
        "gordon", "graham", "greg", "gregory", "harry", "henry", "hugh", "hunter",
        "isaac", "ivan", "jacob", "jake", "james", "jamie", "jared", "jason",
        "javier", "jeff", "jeffrey", "jeremy", "jerry", "jesse", "joel", "john",
        "johnny", "jonathan", "jordan", "jorge", "jose", "joseph", "josh",
        "joshua", "juan", "julian", "justin", "keith", "kevin", "kyle", "larry",
        "lars", "leon", "leonardo", "liam", "logan", "louis", "lucas", "luis",
        "luke", "marco", "marcus", "mario", "martin", "matt", "matthew",
        "michael", "miguel", "mike", "mohammed", "muhammad", "nathan", "neil",
        "nicholas", "nick", "noah", "oliver", "oscar", "owen", "patrick", "paul",
        "pedro", "peter", "phil", "philip", "rafael", "ralph", "randy", "raymond",
        "ricardo", "richard", "ricky", "robert", "roberto", "roger", "ronald",
        "ryan", "samuel", "scott", "sean", "sebastian", "sergio", "simon",
        "stephen", "steve", "steven", "stuart", "taylor", "thomas", "timothy",
        "travis", "trevor", "tyler", "victor", "vincent", "walter", "wayne",
        "william", "zach", "zachary",
        # Feminine
        "abigail", "alice", "alicia", "allison", "amanda", "amber", "amelia",
        "amy", "andrea", "angela", "anna", "anne", "ashley", "barbara",
        "brenda", "brittany", "caroline", "carmen", "catherine", "charlotte",
        "chloe", "christina", "claire", "cynthia", "dana", "deborah", "debra",
        "diana", "donna", "doris", "elena", "elizabeth", "ella", "ellen",
        "emily", "emma", "erica", "erin", "evelyn", "fiona", "gloria",
        "hannah", "heather", "helen", "isabella", "jacqueline", "jane", "janet",
        "jennifer", "jenny", "jessica", "joan", "julia", "julie", "karen",
        "kate", "katherine", "kathleen", "kathy", "katie", "kayla", "kelly",
        "kimberly", "laura", "lauren", "linda", "lisa", "lucy", "madison",
        "margaret", "maria", "marie", "marilyn", "megan", "melissa", "mia",
        "michelle", "monica", "nancy", "natalie", "nicole", "olivia", "pamela",
        "rachel", "rebecca", "sandra", "sara", "sarah", "sharon", "shirley",
        "sofia", "sophia", "sophie", "stephanie", "susan", "teresa", "tiffany",
        "tina", "vanessa", "victoria", "virginia", "wendy", "zoe",
    }
)
