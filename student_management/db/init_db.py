"""Schema creation and seed data for a fresh database."""
from __future__ import annotations

import datetime as dt

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from student_management.core.logging import get_logger
from student_management.db.base import Base
from student_management.models.student import Student
from student_management.models.user import User

USERS_DATA = [
    (1, "admin", "admin123"),
    (2, "user", "user123"),
]

# (id, nome, idade, serie, nota_media, endereco, nome_pai, nome_mae, data_nascimento)
STUDENTS_DATA = [
    (1, "Alice", 10, 5, 8.5, "123 Main St", "John Doe", "Jane Doe", dt.date(2013, 5, 15)),
    (2, "Bob", 11, 6, 7.2, "456 Oak St", "Bob Smith", "Alice Smith", dt.date(2012, 8, 21)),
    (3, "Charlie", 9, 4, 9.0, "789 Pine St", "Charlie Brown", "Lucy Brown", dt.date(2014, 2, 10)),
    (4, "David", 10, 5, 8.8, "101 Cedar St", "David Johnson", "Emily Johnson", dt.date(2013, 7, 18)),
    (5, "Emma", 11, 6, 7.5, "202 Elm St", "Michael White", "Sophia White", dt.date(2012, 10, 5)),
    (6, "Frank", 9, 4, 9.2, "303 Maple St", "Frank Williams", "Grace Williams", dt.date(2014, 1, 22)),
    (7, "Grace", 10, 5, 8.0, "404 Birch St", "George Taylor", "Olivia Taylor", dt.date(2013, 4, 30)),
    (8, "Henry", 11, 6, 7.8, "505 Spruce St", "Henry Moore", "Lily Moore", dt.date(2012, 9, 14)),
    (9, "Isabel", 9, 4, 9.5, "606 Walnut St", "Isaac Davis", "Ava Davis", dt.date(2014, 3, 7)),
    (10, "Jack", 10, 5, 7.9, "707 Sycamore St", "Jack Smith", "Emma Smith", dt.date(2013, 6, 19)),
    (11, "Katherine", 11, 6, 8.3, "808 Cedar St", "James Martin", "Sophia Martin", dt.date(2012, 11, 28)),
    (12, "Liam", 9, 4, 9.1, "909 Oak St", "Liam Turner", "Ella Turner", dt.date(2014, 2, 1)),
    (13, "Mia", 10, 5, 8.7, "1010 Maple St", "Ryan Brown", "Mia Brown", dt.date(2013, 5, 12)),
    (14, "Nathan", 11, 6, 7.4, "1111 Birch St", "Nathan Harris", "Eva Harris", dt.date(2012, 8, 3)),
    (15, "Olivia", 9, 4, 9.3, "1212 Pine St", "Daniel Green", "Olivia Green", dt.date(2014, 1, 9)),
    (16, "Peter", 10, 5, 8.4, "1313 Elm St", "Peter Clark", "Ava Clark", dt.date(2013, 4, 18)),
    (17, "Quinn", 11, 6, 7.1, "1414 Cedar St", "Quinn Davis", "Grace Davis", dt.date(2012, 9, 27)),
    (18, "Rachel", 9, 4, 9.4, "1515 Walnut St", "Richard White", "Rachel White", dt.date(2014, 2, 14)),
    (19, "Sam", 10, 5, 8.6, "1616 Sycamore St", "Sam Turner", "Emily Turner", dt.date(2013, 6, 6)),
    (20, "Tristan", 11, 6, 7.7, "1717 Spruce St", "Tristan Harris", "Lily Harris", dt.date(2012, 11, 23)),
    (21, "Uma", 9, 4, 9.6, "1818 Maple St", "Uma Smith", "Sophia Smith", dt.date(2014, 3, 30)),
    (22, "Victor", 10, 5, 8.2, "1919 Oak St", "Victor Martin", "Ella Martin", dt.date(2013, 5, 24)),
    (23, "Wendy", 11, 6, 7.0, "2020 Pine St", "Wendy Brown", "Michael Brown", dt.date(2012, 10, 10)),
    (24, "Xander", 9, 4, 9.7, "2121 Birch St", "Xander Turner", "Sophia Turner", dt.date(2014, 1, 17)),
    (25, "Yara", 10, 5, 8.1, "2222 Elm St", "Yara Davis", "John Davis", dt.date(2013, 4, 4)),
    (26, "Zane", 11, 6, 7.3, "2323 Cedar St", "Zane Harris", "Lily Harris", dt.date(2012, 9, 8)),
    (27, "Aaron", 9, 4, 9.8, "2424 Walnut St", "Aaron Smith", "Sophia Smith", dt.date(2014, 2, 21)),
    (28, "Bella", 10, 5, 8.9, "2525 Sycamore St", "Bella Martin", "Ella Martin", dt.date(2013, 6, 14)),
    (29, "Carlos", 11, 6, 7.6, "2626 Spruce St", "Carlos Turner", "Emily Turner", dt.date(2012, 11, 5)),
    (30, "Diana", 9, 4, 9.9, "2727 Maple St", "Diana White", "Michael White", dt.date(2014, 3, 18)),
    (31, "Ethan", 10, 5, 8.8, "2828 Oak St", "Ethan Brown", "Sophia Brown", dt.date(2013, 4, 23)),
    (32, "Fiona", 11, 6, 7.5, "2929 Pine St", "Fiona Harris", "John Harris", dt.date(2012, 10, 16)),
    (33, "Gavin", 9, 4, 9.2, "3030 Birch St", "Gavin Smith", "Olivia Smith", dt.date(2014, 1, 3)),
    (34, "Holly", 10, 5, 8.0, "3131 Cedar St", "Holly Davis", "Daniel Davis", dt.date(2013, 5, 29)),
    (35, "Ian", 11, 6, 7.8, "3232 Elm St", "Ian Turner", "Sophia Turner", dt.date(2012, 9, 20)),
    (36, "Jenna", 9, 4, 9.5, "3333 Sycamore St", "Jenna Martin", "Ella Martin", dt.date(2014, 2, 26)),
    (37, "Kevin", 10, 5, 8.4, "3434 Spruce St", "Kevin Harris", "Lily Harris", dt.date(2013, 6, 9)),
    (38, "Lila", 11, 6, 7.2, "3535 Maple St", "Lila White", "Michael White", dt.date(2012, 8, 14)),
    (39, "Mark", 9, 4, 9.3, "3636 Oak St", "Mark Brown", "Sophia Brown", dt.date(2014, 1, 12)),
    (40, "Nina", 10, 5, 8.7, "3737 Pine St", "Nina Smith", "Olivia Smith", dt.date(2013, 5, 17)),
    (41, "Oscar", 11, 6, 7.9, "3838 Birch St", "Oscar Turner", "Emily Turner", dt.date(2012, 9, 30)),
    (42, "Paula", 9, 4, 9.4, "3939 Elm St", "Paula Harris", "John Harris", dt.date(2014, 3, 11)),
    (43, "Quincy", 10, 5, 8.1, "4040 Cedar St", "Quincy Davis", "Daniel Davis", dt.date(2013, 4, 1)),
    (44, "Ruby", 11, 6, 7.7, "4141 Sycamore St", "Ruby Martin", "Ella Martin", dt.date(2012, 11, 30)),
    (45, "Steve", 9, 4, 9.6, "4242 Spruce St", "Steve White", "Michael White", dt.date(2014, 2, 4)),
    (46, "Tina", 10, 5, 8.3, "4343 Maple St", "Tina Brown", "Sophia Brown", dt.date(2013, 5, 8)),
    (47, "Ursula", 11, 6, 7.1, "4444 Oak St", "Ursula Smith", "Olivia Smith", dt.date(2012, 8, 27)),
    (48, "Vince", 9, 4, 9.1, "4545 Pine St", "Vince Turner", "Emily Turner", dt.date(2014, 1, 20)),
    (49, "Wes", 10, 5, 8.9, "4646 Birch St", "Wes Harris", "Lily Harris", dt.date(2013, 4, 27)),
    (50, "Xena", 11, 6, 7.4, "4747 Elm St", "Xena Davis", "John Davis", dt.date(2012, 9, 13)),
    (51, "Yvonne", 9, 4, 9.7, "4848 Sycamore St", "Yvonne Martin", "Ella Martin", dt.date(2014, 3, 24)),
    (52, "Zach", 10, 5, 8.2, "4949 Spruce St", "Zach White", "Michael White", dt.date(2013, 5, 3)),
]


def create_tables(db: Session) -> None:
    Base.metadata.create_all(bind=db.get_bind())


def seed(db: Session) -> bool:
    """Populates users and students. Returns False when students already exist."""
    if db.scalar(select(Student.id).limit(1)) is not None:
        return False

    for id_, username, password in USERS_DATA:
        if db.scalar(select(User.id).where(User.username == username)) is not None:
            continue
        user = User(username=username, password=password)
        if db.get(User, id_) is None:
            user.id = id_
        db.add(user)

    for row in STUDENTS_DATA:
        db.add(Student(id=row[0], **dict(zip(Student.EDITABLE_FIELDS, row[1:]))))

    db.flush()
    if db.get_bind().dialect.name == "postgresql":
        # ids explícitos não avançam a sequence do SERIAL
        for table in ("users", "students"):
            db.execute(
                text(
                    f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                    f"(SELECT MAX(id) FROM {table}))"
                )
            )
    db.commit()
    return True


def init_db(db: Session) -> None:
    create_tables(db)
    seeded = seed(db)
    get_logger().info("db.init", seeded=seeded)
