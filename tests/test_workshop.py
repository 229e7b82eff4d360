from dsakit.workshop import Employee, remove_duplicates

STAFF = [
    Employee("Jane", "Jones", 123),
    Employee("John", "Doe", 5678),
    Employee("Mike", "Wilson", 45),
    Employee("Mary", "Smith", 5555),
    Employee("John", "Doe", 5678),
    Employee("Bill", "End", 3948),
    Employee("Jane", "Jones", 123),
]


def test_employee_str():
    assert str(Employee("Jane", "Jones", 123)) == "Employee{ firstName=Jane, lastName=Jones, Id=123}"


def test_remove_duplicates_keeps_first_occurrence_order():
    result = remove_duplicates(STAFF)
    assert [e.id for e in result] == [123, 5678, 45, 5555, 3948]


def test_remove_duplicates_ids_unique():
    result = remove_duplicates(STAFF)
    ids = [e.id for e in result]
    assert len(ids) == len(set(ids))
    assert set(ids) == {e.id for e in STAFF}


def test_duplicate_detected_by_id_only():
    first = Employee("Ann", "Lee", 7)
    second = Employee("Bob", "Ray", 7)
    result = remove_duplicates([first, second])
    assert result == [first]
    assert result[0] is first


def test_input_not_modified():
    staff = list(STAFF)
    remove_duplicates(staff)
    assert staff == STAFF


def test_empty():
    assert remove_duplicates([]) == []