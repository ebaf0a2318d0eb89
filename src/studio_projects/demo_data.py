"""Demo accounts and projects loaded at startup."""

from datetime import UTC, date, datetime

from studio_projects.domain.models import Project, User


def demo_users() -> list[User]:
    """Return the studio's starter accounts."""
    now = datetime.now(tz=UTC)
    return [
        User(
            id="1",
            email="admin",
            login="admin",
            password="admin",  # noqa: S106
            name="Администратор",
            role="admin",
            department="Управление",
            position="Системный администратор",
            created_at=now,
        ),
        User(
            id="2",
            email="john@company.com",
            login="john@company.com",
            password="password123",  # noqa: S106
            name="John Doe",
            role="photographer",
            department="Engineering",
            position="Software Developer",
            salary=75000,
            created_at=now,
        ),
        User(
            id="3",
            email="jane@company.com",
            login="jane@company.com",
            password="password123",  # noqa: S106
            name="Jane Smith",
            role="designer",
            department="Marketing",
            position="Marketing Manager",
            salary=65000,
            created_at=now,
        ),
    ]


def demo_projects(users: list[User]) -> list[Project]:
    """Return starter projects assigned to the demo accounts."""
    admin, photographer, designer = users[:3]
    return [
        Project(
            id="1",
            title='Свадебный альбом "Анна & Михаил"',
            album_type="Свадебный альбом",
            description="Создание премиального свадебного альбома для молодоженов",
            status="in-progress",
            manager=admin,
            photographer=photographer,
            designer=designer,
            deadline=date(2024, 3, 15),
            created_at=datetime(2024, 2, 1, tzinfo=UTC),
            updated_at=datetime(2024, 2, 10, tzinfo=UTC),
            photos_count=45,
            designs_count=3,
        ),
        Project(
            id="2",
            title='Детская фотосессия "Семья Петровых"',
            album_type="Детский альбом",
            description="Семейная фотосессия с детьми для создания памятного альбома",
            status="planning",
            manager=admin,
            photographer=photographer,
            deadline=date(2024, 3, 20),
            created_at=datetime(2024, 2, 5, tzinfo=UTC),
            updated_at=datetime(2024, 2, 5, tzinfo=UTC),
        ),
        Project(
            id="3",
            title='Корпоративный альбом "ООО Рога и копыта"',
            album_type="Корпоративный альбом",
            description=(
                "Корпоративная фотосессия и создание презентационного альбома"
            ),
            status="review",
            manager=admin,
            photographer=photographer,
            designer=designer,
            deadline=date(2024, 2, 28),
            created_at=datetime(2024, 1, 15, tzinfo=UTC),
            updated_at=datetime(2024, 2, 12, tzinfo=UTC),
            photos_count=30,
            designs_count=5,
        ),
    ]
