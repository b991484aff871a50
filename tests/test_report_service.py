import pytest

from schemas.attendance import AttendanceCreate
from schemas.comments import CommentCreate
from schemas.scores import ScoreCreate
from services.records_service import RecordsService
from services.report_service import ReportService
from services.repository import RecordNotFound

TERM = {"term": "First Term", "academic_year": "2024/2025"}


@pytest.fixture
def scored_school(repo, school):
    """
    Ama  : maths 80/70 -> 74, english 60/50 -> 54 = 128
    Kofi : maths 70/80 -> 76, english 55/50 -> 52 = 128 (tie, enrolled after Ama)
    Esi  : maths 40/40 -> 40                       =  40
    Yaw  : nothing                                 =   0
    """
    records = RecordsService(repo)
    ama, kofi, esi, _ = school["students"]
    maths, english = school["maths"].id, school["english"].id
    for student, subject, class_score, exam_score in [
        (ama, maths, 80, 70), (ama, english, 60, 50),
        (kofi, maths, 70, 80), (kofi, english, 55, 50),
        (esi, maths, 40, 40),
    ]:
        records.record_score(ScoreCreate(student_id=student.id, subject_id=subject, class_score=class_score, exam_score=exam_score, **TERM))
    records.record_attendance(AttendanceCreate(student_id=kofi.id, total_days_present=18, total_days_in_term=20, **TERM))
    records.record_comment(CommentCreate(student_id=kofi.id, interest="Music", class_teacher_comment="Good effort", **TERM))
    return school


def test_class_report_positions(repo, scored_school):
    report = ReportService(repo).class_report(scored_school["class"].id, **TERM)

    assert report.class_name == "JHS 1A"
    assert [(row.full_name, row.total_score, row.position) for row in report.students] == [
        ("Ama Mensah", 128, 1),
        ("Kofi Boateng", 128, 2),
        ("Esi Owusu", 40, 3),
        ("Yaw Asante", 0, 4),
    ]
    assert report.students[0].average_score == 64
    assert report.students[0].grade == "C4"
    assert report.students[3].grade == "F9"


def test_class_report_summary(repo, scored_school):
    summary = ReportService(repo).class_report(scored_school["class"].id, **TERM).summary
    assert summary.student_count == 4
    assert summary.highest_total == 128
    assert summary.average_total == 74
    assert summary.overall_grade == "E8"  # mean of averages (64 + 64 + 40 + 0) / 4 = 42


def test_other_term_has_no_scores(repo, scored_school):
    report = ReportService(repo).class_report(scored_school["class"].id, term="Second Term", academic_year="2024/2025")
    assert [row.total_score for row in report.students] == [0, 0, 0, 0]
    assert [row.position for row in report.students] == [1, 2, 3, 4]


def test_report_card(repo, scored_school):
    kofi = scored_school["students"][1]
    card = ReportService(repo).report_card(kofi.id, **TERM)

    assert card.full_name == "Kofi Boateng"
    assert card.class_name == "JHS 1A"
    assert card.position == 2
    assert card.total_students == 4
    assert card.total_score == 128
    assert [(line.subject_name, line.total, line.grade) for line in card.lines] == [
        ("Mathematics", 76, "B2"),
        ("English Language", 52, "C6"),
    ]
    assert card.lines[0].interpretation == "Very Good"
    assert card.attendance.percentage == 90
    assert card.comment.interest == "Music"


def test_report_card_without_records(repo, scored_school):
    yaw = scored_school["students"][3]
    card = ReportService(repo).report_card(yaw.id, **TERM)
    assert card.lines == []
    assert card.average_score == 0
    assert card.grade == "F9"
    assert card.position == 4
    assert card.attendance is None
    assert card.comment is None


def test_report_card_unknown_student(repo, scored_school):
    with pytest.raises(RecordNotFound):
        ReportService(repo).report_card(404, **TERM)


def test_dashboard(repo, scored_school):
    summary = ReportService(repo).dashboard()
    assert summary.total_students == 4
    assert summary.total_classes == 1
    assert summary.total_subjects == 2
    assert summary.total_teachers == 0
    assert summary.average_score == 59  # (74 + 54 + 76 + 52 + 40) / 5 = 59.2
    assert summary.average_attendance == 90


def test_delete_student_cascades(repo, scored_school, db_session):
    from models.attendance import Attendance as AttendanceModel
    from models.comments import Comment as CommentModel
    from models.scores import Score as ScoreModel

    kofi = scored_school["students"][1]
    repo.delete_student(kofi.id)
    assert db_session.query(ScoreModel).filter(ScoreModel.student_id == kofi.id).count() == 0
    assert db_session.query(AttendanceModel).count() == 0
    assert db_session.query(CommentModel).count() == 0

    report = ReportService(repo).class_report(scored_school["class"].id, **TERM)
    assert [row.full_name for row in report.students] == ["Ama Mensah", "Esi Owusu", "Yaw Asante"]


def test_report_card_survives_missing_class(repo, scored_school, db_session):
    kofi = scored_school["students"][1]
    # class row removed underneath its students
    db_session.delete(scored_school["class"])
    db_session.commit()

    card = ReportService(repo).report_card(kofi.id, **TERM)
    assert card.class_name is None
    assert card.position is None
    assert card.total_students == 0
    assert card.total_score == 128


def test_teacher_classes(repo, scored_school, db_session):
    from models.teachers import Teacher as TeacherModel

    teacher = TeacherModel(
        full_name="Kwabena Asare",
        username="kasare",
        assigned_class_ids=f"{scored_school['class'].id},999",
        assigned_subject_ids=f"{scored_school['maths'].id}",
    )
    db_session.add(teacher)
    db_session.commit()

    data = ReportService(repo).teacher_classes(teacher.id, **TERM)

    assert data.full_name == "Kwabena Asare"
    assert [s.name for s in data.subjects] == ["Mathematics"]
    # the unknown class 999 is skipped
    assert [c.class_name for c in data.classes] == ["JHS 1A"]
    assert data.total_students == 4
    assert [(s.full_name, s.subject_count, s.average_score, s.total_score, s.grade) for s in data.classes[0].students] == [
        ("Ama Mensah", 2, 64, 128, "C4"),
        ("Kofi Boateng", 2, 64, 128, "C4"),
        ("Esi Owusu", 1, 40, 40, "E8"),
        ("Yaw Asante", 0, 0, 0, "F9"),
    ]


def test_teacher_classes_rounds_average(repo, school, db_session):
    from models.teachers import Teacher as TeacherModel

    records = RecordsService(repo)
    ama = school["students"][0]
    # 74 and 55 -> average 64.5
    records.record_score(ScoreCreate(student_id=ama.id, subject_id=school["maths"].id, class_score=80, exam_score=70, **TERM))
    records.record_score(ScoreCreate(student_id=ama.id, subject_id=school["english"].id, class_score=55, exam_score=55, **TERM))

    teacher = TeacherModel(full_name="Adwoa Boakye", username="aboakye", assigned_class_ids=str(school["class"].id))
    db_session.add(teacher)
    db_session.commit()

    row = ReportService(repo).teacher_classes(teacher.id, **TERM).classes[0].students[0]
    assert row.average_score == 65
    assert row.grade == "C4"


def test_teacher_classes_unknown_teacher(repo, school):
    with pytest.raises(RecordNotFound):
        ReportService(repo).teacher_classes(404, **TERM)
