"""Example: basic usage of student-records."""

from student_records import RegistryConfig, StudentRegistry

# STUDENT_RECORDS_COURSE_COST etc. override the defaults
registry = StudentRegistry(RegistryConfig.from_env())

# Add students and enroll them
alice = registry.add_student("Alice").student_id
bob = registry.add_student("Bob").student_id
registry.enroll_student(alice, "Math")
registry.enroll_student(alice, "Physics")
registry.enroll_student(bob, "History")

# Payments: one accepted, two rejected
for student_id, amount in [(alice, 250), (bob, 600), (bob, 0)]:
    result = registry.pay_tuition(student_id, amount)
    print(f"[{result.code}] {result.message}")

# Per-student status
for record in registry.records:
    print()
    print(registry.show_status(record.student_id).message)
