""" Deterministic fake data: persons """

from __future__ import annotations

import random
import uuid

from cursorlist.typing import RecordDict

from .memory import ListDataSource


FIRST_NAMES = (
    'Adèle', 'Agathe', 'Alain', 'Alexandre', 'Alice', 'Amélie', 'Antoine', 'Aurélie',
    'Bernard', 'Camille', 'Céline', 'Charles', 'Chloé', 'Claire', 'Damien', 'Denise',
    'Élodie', 'Émile', 'Étienne', 'François', 'Gabriel', 'Gérard', 'Hélène', 'Hugo',
    'Inès', 'Jacques', 'Jeanne', 'Julien', 'Léa', 'Louis', 'Lucie', 'Manon',
    'Marcel', 'Margaux', 'Mathis', 'Nathalie', 'Nicolas', 'Océane', 'Pascal', 'Paulette',
    'Raphaël', 'Rémi', 'Sophie', 'Sylvie', 'Théo', 'Thérèse', 'Valentin', 'Yves',
)

LAST_NAMES = (
    'Bernard', 'Bertrand', 'Blanc', 'Bonnet', 'Boyer', 'Chevalier', 'Clément', 'David',
    'Dubois', 'Dumont', 'Dupont', 'Durand', 'Faure', 'Fontaine', 'Fournier', 'Garnier',
    'Gauthier', 'Girard', 'Guerin', 'Lambert', 'Laurent', 'Lefebvre', 'Legrand', 'Leroy',
    'Martin', 'Masson', 'Mercier', 'Michel', 'Moreau', 'Morel', 'Muller', 'Nicolas',
    'Perrin', 'Petit', 'Richard', 'Robert', 'Robin', 'Rousseau', 'Roux', 'Simon',
    'Thomas', 'Vincent',
)


def generate_persons(count: int, *, seed: int) -> list[RecordDict]:
    """ Generate `count` persons. The same (count, seed) always gives the same list

    Uses its own random generator: the global random state is neither used nor touched.

    Example:
        generate_persons(2, seed=123)
        => [{'id': '...', 'firstname': 'Léa', 'lastname': 'Roux'}, ...]
    """
    rng = random.Random(seed)
    return [
        {
            'id': str(uuid.UUID(int=rng.getrandbits(128), version=4)),
            'firstname': rng.choice(FIRST_NAMES),
            'lastname': rng.choice(LAST_NAMES),
        }
        for _ in range(count)
    ]


def seeded_source(count: int, *, seed: int) -> ListDataSource:
    """ Make a data source with `count` generated persons """
    return ListDataSource(generate_persons(count, seed=seed))
