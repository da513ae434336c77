from typing import Any, Dict

COURSES: Dict[str, Dict[str, Any]] = {
    "cs101": {
        "name": "CS 101 - Introduction to Computer Science",
        "professors": [
            {
                "id": "smith",
                "name": "Dr. Smith",
                "grade_components": [
                    {"name": "Assignments", "weight": 20, "difficulty": 3},
                    {"name": "Midterm Exam", "weight": 30, "difficulty": 4},
                    {"name": "Final Exam", "weight": 40, "difficulty": 5},
                    {"name": "Participation", "weight": 10, "difficulty": 1},
                ],
            },
            {
                "id": "johnson",
                "name": "Prof. Johnson",
                "grade_components": [
                    {"name": "Labs", "weight": 25, "difficulty": 3},
                    {"name": "Projects", "weight": 35, "difficulty": 4},
                    {"name": "Midterm", "weight": 20, "difficulty": 4},
                    {"name": "Final Exam", "weight": 20, "difficulty": 5},
                ],
            },
        ],
    },
    "math201": {
        "name": "MATH 201 - Linear Algebra",
        "professors": [
            {
                "id": "brown",
                "name": "Dr. Brown",
                "grade_components": [
                    {"name": "Homework", "weight": 25, "difficulty": 4},
                    {"name": "Quizzes", "weight": 15, "difficulty": 3},
                    {"name": "Midterm 1", "weight": 20, "difficulty": 4},
                    {"name": "Midterm 2", "weight": 20, "difficulty": 4},
                    {"name": "Final Exam", "weight": 20, "difficulty": 5},
                ],
            },
        ],
    },
    "phys101": {
        "name": "PHYS 101 - Physics I",
        "professors": [
            {
                "id": "wilson",
                "name": "Dr. Wilson",
                "grade_components": [
                    {"name": "Labs", "weight": 20, "difficulty": 3},
                    {"name": "Homework", "weight": 20, "difficulty": 3},
                    {"name": "Midterm 1", "weight": 15, "difficulty": 4},
                    {"name": "Midterm 2", "weight": 15, "difficulty": 4},
                    {"name": "Final Exam", "weight": 30, "difficulty": 5},
                ],
            },
            {
                "id": "chen",
                "name": "Prof. Chen",
                "grade_components": [
                    {"name": "Problem Sets", "weight": 30, "difficulty": 4},
                    {"name": "Lab Reports", "weight": 20, "difficulty": 3},
                    {"name": "Midterm Exam", "weight": 20, "difficulty": 4},
                    {"name": "Final Project", "weight": 20, "difficulty": 5},
                    {"name": "Class Participation", "weight": 10, "difficulty": 2},
                ],
            },
        ],
    },
}
