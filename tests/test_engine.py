import logging
import unittest

from gradeplannr.config.log_config import context
from gradeplannr.core.components import GradeComponent
from gradeplannr.core.engine import (
    GradeEngine,
    calculate_current_grade,
    calculate_final_grade,
    calculate_required_grade,
    generate_study_plan,
)


def _half_done():
    return [GradeComponent("Midterm", 50, score=80), GradeComponent("Final", 50)]


def _smith():
    return [
        GradeComponent("Assignments", 20, 3),
        GradeComponent("Midterm Exam", 30, 4),
        GradeComponent("Final Exam", 40, 5),
        GradeComponent("Participation", 10, 1),
    ]


class CurrentGradeTests(unittest.TestCase):
    def test_empty_list_is_not_available(self):
        result = calculate_current_grade([])
        self.assertEqual(result.percentage, 0)
        self.assertEqual(result.letter, "N/A")
        self.assertFalse(result.is_available)

    def test_no_scored_components_is_not_available(self):
        result = calculate_current_grade(_smith())
        self.assertEqual((result.percentage, result.letter), (0, "N/A"))

    def test_blank_and_non_numeric_scores_are_ignored(self):
        components = [GradeComponent("A", 50, score=""), GradeComponent("B", 50, score="abc")]
        self.assertEqual(calculate_current_grade(components).letter, "N/A")

    def test_zero_weight_is_not_available(self):
        result = calculate_current_grade([GradeComponent("Bonus", 0, score=90)])
        self.assertEqual(result.letter, "N/A")

    def test_renormalizes_against_completed_weight(self):
        components = [GradeComponent("Quiz", 20, score=100), GradeComponent("Final", 80)]
        result = calculate_current_grade(components)
        self.assertEqual(result.percentage, 100)
        self.assertEqual(result.letter, "A+")

    def test_uniform_score_is_independent_of_weights(self):
        components = [
            GradeComponent("A", 20, score=75),
            GradeComponent("B", 30, score=75),
            GradeComponent("C", 5, score=75),
        ]
        result = calculate_current_grade(components)
        self.assertAlmostEqual(result.percentage, 75, places=2)
        self.assertEqual(result.letter, "B")

    def test_half_done_scenario(self):
        result = calculate_current_grade(_half_done())
        self.assertEqual(result.percentage, 80)
        self.assertEqual(result.letter, "A-")

    def test_numeric_strings_count_as_scores(self):
        components = [GradeComponent("A", 40, score="90"), GradeComponent("B", 60, score=" 65 ")]
        self.assertAlmostEqual(calculate_current_grade(components).percentage, 75.0, places=2)

    def test_rounds_to_two_places(self):
        components = [GradeComponent("A", 30, score=70), GradeComponent("B", 40, score=85)]
        self.assertEqual(calculate_current_grade(components).percentage, 78.57)


class RequiredGradeTests(unittest.TestCase):
    def test_half_done_target_85(self):
        result = calculate_required_grade(85, _half_done())
        self.assertEqual(result.required_grade, 90)
        self.assertEqual(result.remaining_weight, 50)
        self.assertTrue(result.is_achievable)
        self.assertEqual(result.current_grade, 80)

    def test_half_done_target_100_is_not_capped(self):
        result = calculate_required_grade(100, _half_done())
        self.assertEqual(result.required_grade, 120)
        self.assertFalse(result.is_achievable)

    def test_negative_requirement_is_floored_but_achievable(self):
        components = [GradeComponent("A", 60, score=100), GradeComponent("B", 40)]
        result = calculate_required_grade(50, components)
        self.assertEqual(result.required_grade, 0)
        self.assertTrue(result.is_achievable)

    def test_exactly_100_is_achievable(self):
        components = [GradeComponent("A", 50, score=80), GradeComponent("B", 50)]
        result = calculate_required_grade(90, components)
        self.assertEqual(result.required_grade, 100)
        self.assertTrue(result.is_achievable)

    def test_solution_satisfies_linear_equation(self):
        components = [GradeComponent("A", 30, score=70), GradeComponent("B", 70)]
        result = calculate_required_grade(80, components)
        completed_score = 70 * 30 / 100
        self.assertAlmostEqual(
            completed_score + result.required_grade * result.remaining_weight / 100, 80, delta=0.01
        )

    def test_nothing_completed(self):
        result = calculate_required_grade(85, _smith())
        self.assertEqual(result.required_grade, 85)
        self.assertEqual(result.remaining_weight, 100)
        self.assertEqual(result.current_grade, 0)

    def test_non_numeric_score_counts_as_remaining(self):
        components = [GradeComponent("A", 50, score=80), GradeComponent("B", 50, score="n/a")]
        self.assertEqual(calculate_required_grade(85, components).remaining_weight, 50)

    def test_all_completed_reaching_target(self):
        components = [GradeComponent("A", 50, score=90), GradeComponent("B", 50, score=80)]
        result = calculate_required_grade(84, components)
        self.assertEqual(result.required_grade, 0)
        self.assertEqual(result.remaining_weight, 0)
        self.assertTrue(result.is_achievable)
        self.assertEqual(result.current_grade, 85)
        self.assertFalse(result.has_remaining)

    def test_all_completed_missing_target(self):
        components = [GradeComponent("A", 50, score=90), GradeComponent("B", 50, score=80)]
        self.assertFalse(calculate_required_grade(90, components).is_achievable)

    def test_empty_list(self):
        result = calculate_required_grade(85, [])
        self.assertEqual(result.required_grade, 0)
        self.assertEqual(result.remaining_weight, 0)
        self.assertFalse(result.is_achievable)
        self.assertEqual(result.current_grade, 0)


class StudyPlanTests(unittest.TestCase):
    def test_ranks_by_weight_difficulty_and_gap(self):
        plan = generate_study_plan(_smith(), 85)
        self.assertEqual([item.name for item in plan], ["Final Exam", "Midterm Exam", "Assignments"])
        self.assertAlmostEqual(plan[0].priority, 40 * 5 * (1 + 85 / 20))
        for item in plan:
            self.assertFalse(item.is_completed)
            self.assertEqual(item.current_score, 0)

    def test_returns_at_most_three(self):
        components = [GradeComponent(f"C{i}", 10, 2) for i in range(6)]
        self.assertEqual(len(generate_study_plan(components, 85)), 3)

    def test_excludes_completed_components(self):
        components = _smith()
        components[2].score = 75
        plan = generate_study_plan(components, 85)
        self.assertNotIn("Final Exam", [item.name for item in plan])

    def test_all_completed_or_empty_is_empty(self):
        self.assertEqual(generate_study_plan([], 85), [])
        done = [GradeComponent("A", 50, score=90), GradeComponent("B", 50, score=60)]
        self.assertEqual(generate_study_plan(done, 85), [])

    def test_ties_keep_input_order(self):
        components = [GradeComponent("First", 25, 2), GradeComponent("Second", 25, 2), GradeComponent("Third", 50, 1)]
        plan = generate_study_plan(components, 85)
        self.assertEqual([item.name for item in plan], ["First", "Second", "Third"])

    def test_zero_target_skips_gap_scaling(self):
        plan = generate_study_plan([GradeComponent("A", 20, 3)], 0)
        self.assertEqual(plan[0].priority, 60)

    def test_missing_difficulty_defaults_to_one(self):
        plan = generate_study_plan([GradeComponent("A", 20, difficulty=None)], 0)
        self.assertEqual(plan[0].priority, 20)
        self.assertEqual(plan[0].difficulty, 1)

    def test_non_numeric_score_is_incomplete(self):
        plan = generate_study_plan([GradeComponent("A", 20, 3, score="abc")], 85)
        self.assertEqual(len(plan), 1)
        self.assertEqual(plan[0].current_score, 0)
        self.assertEqual(plan[0].priority, 60)

    def test_blank_score_outranks_unparsable_score(self):
        components = [GradeComponent("Bad", 30, 3, score="abc"), GradeComponent("Blank", 20, 2, score=" ")]
        plan = generate_study_plan(components, 85)
        self.assertEqual([item.name for item in plan], ["Blank", "Bad"])
        self.assertAlmostEqual(plan[0].priority, 20 * 2 * (1 + 85 / 20))
        self.assertEqual(plan[1].priority, 90)

    def test_aim_for_prefers_component_target(self):
        components = [GradeComponent("A", 20, 3, target=95), GradeComponent("B", 20, 2)]
        plan = generate_study_plan(components, 85)
        self.assertEqual(plan[0].aim_for(85), 95)
        self.assertEqual(plan[1].aim_for(85), 85)


class FinalGradeTests(unittest.TestCase):
    def test_missing_scores_count_as_zero(self):
        result = calculate_final_grade(_half_done())
        self.assertEqual(result.percentage, 40)
        self.assertEqual(result.letter, "F")

    def test_all_scored(self):
        components = [GradeComponent("A", 50, score=90), GradeComponent("B", 50, score=80)]
        result = calculate_final_grade(components)
        self.assertEqual(result.percentage, 85)
        self.assertEqual(result.letter, "A")

    def test_no_scores_is_zero_not_sentinel(self):
        result = calculate_final_grade(_smith())
        self.assertEqual((result.percentage, result.letter), (0, "F"))

    def test_empty_or_zero_weight_is_not_available(self):
        self.assertEqual(calculate_final_grade([]).letter, "N/A")
        self.assertEqual(calculate_final_grade([GradeComponent("A", 0, score=50)]).letter, "N/A")


class GradeEngineTests(unittest.TestCase):
    def test_summarize_bundles_every_result(self):
        engine = GradeEngine()
        summary = engine.summarize(_half_done(), 85)
        self.assertEqual(summary.current.percentage, 80)
        self.assertEqual(summary.required.required_grade, 90)
        self.assertEqual([item.name for item in summary.study_plan], ["Final"])
        self.assertEqual(summary.final.percentage, 40)

    def test_summarize_logs_at_debug_with_context(self):
        with self.assertLogs("gradeplannr.core.engine", level="DEBUG") as logs:
            GradeEngine().summarize(_half_done(), 85, log_context=context("cs101", "smith"))
        self.assertEqual([record.levelno for record in logs.records], [logging.DEBUG])
        self.assertEqual(logs.records[0].course_id, "cs101")
        self.assertEqual(logs.records[0].professor_id, "smith")

    def test_study_plan_size_is_configurable(self):
        engine = GradeEngine(study_plan_size=1)
        self.assertEqual(len(engine.generate_study_plan(_smith(), 85)), 1)

    def test_does_not_mutate_components(self):
        components = _half_done()
        GradeEngine().summarize(components, 85)
        self.assertEqual(components[0].score, 80)
        self.assertIsNone(components[1].score)

    def test_letter_and_points_lookup(self):
        engine = GradeEngine()
        self.assertEqual(engine.letter_for(85), "A")
        self.assertEqual(engine.points_for(85), 4.0)

    def test_to_dict(self):
        engine = GradeEngine()
        self.assertEqual(engine.calculate_current_grade(_half_done()).to_dict(), {"percentage": 80.0, "letter": "A-"})
        plan = engine.generate_study_plan(_half_done(), 85)
        self.assertEqual(plan[0].to_dict()["name"], "Final")


if __name__ == "__main__":
    unittest.main()
