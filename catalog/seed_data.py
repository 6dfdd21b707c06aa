"""Records loaded into a freshly created database on every startup.

Passwords are plaintext here and hashed during bootstrap. Course ``userId``
values refer to the position of the owner in ``SEED_USERS`` (1-based), which
matches the ids the users receive in a new table.
"""

SEED_USERS = [
    {
        'firstName': 'Joe',
        'lastName': 'Smith',
        'emailAddress': 'joe@smith.com',
        'password': 'joepassword',
    },
    {
        'firstName': 'Sally',
        'lastName': 'Jones',
        'emailAddress': 'sally@jones.com',
        'password': 'sallypassword',
    },
]

SEED_COURSES = [
    {
        'userId': 1,
        'title': 'Build a Basic Bookcase',
        'description': (
            'High-end furniture projects are great to dream about, but a '
            'simple bookcase is a better place to start. This course walks '
            'through measuring, cutting, and assembling a sturdy bookcase '
            'with basic hand tools.'
        ),
        'estimatedTime': '12 hours',
        'materialsNeeded': (
            '* 1/2 x 3/4 inch parting strip\n'
            '* 1 x 2 common pine\n'
            '* 1 x 4 common pine\n'
            '* 1/4 inch thick lauan plywood\n'
            '* Finishing nails\n'
            '* Sandpaper\n'
            '* Wood glue\n'
            '* Wood filler\n'
            '* Minwax Oil Based Polyurethane'
        ),
    },
    {
        'userId': 2,
        'title': 'Learn How to Program',
        'description': (
            'An introduction to programming for people who have never '
            'written code. Covers variables, control flow, functions, and '
            'how to break a problem into small steps a computer can follow.'
        ),
        'estimatedTime': None,
        'materialsNeeded': None,
    },
    {
        'userId': 2,
        'title': 'Learn How to Test Programs',
        'description': (
            'Once you can write a program, the next step is proving that it '
            'works. This course introduces unit tests, test fixtures, and '
            'the habit of writing a failing test before fixing a bug.'
        ),
        'estimatedTime': None,
        'materialsNeeded': None,
    },
]
