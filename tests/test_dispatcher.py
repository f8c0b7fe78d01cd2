"""
View dispatcher tests: route-to-view dispatch and user actions.
"""

from minielearn.classroom import MemoryLocation, Router, course_path
from minielearn.viewer import CourseView, ViewDispatcher


class TestRender:

    def test_home(self, dispatcher, location, renderer):
        location.set("#/")
        dispatcher.render()
        view, cards = renderer.last
        assert view == "home"
        assert [card.course.id for card in cards] == ["graphics", "data-analytics"]
        assert all(card.metrics.done == 0 for card in cards)

    def test_empty_location_renders_home(self, dispatcher, renderer):
        dispatcher.render()
        assert renderer.last[0] == "home"

    def test_course_detail(self, dispatcher, location, renderer, store, graphics):
        store.toggle_lesson(graphics, "g-3", True)
        location.set("#/course/graphics")
        dispatcher.render()
        view, detail = renderer.last
        assert view == "course_detail"
        assert isinstance(detail, CourseView)
        assert detail.course.id == "graphics"
        assert detail.metrics.done == 1
        assert [row.is_done for row in detail.lessons] == [False, False, True, False]

    def test_encoded_course_id(self, dispatcher, location, renderer):
        location.set("#/course/data%2Danalytics")
        dispatcher.render()
        view, detail = renderer.last
        assert view == "course_detail"
        assert detail.course.id == "data-analytics"

    def test_unknown_course_not_found(self, dispatcher, location, renderer):
        location.set("#/course/nope")
        dispatcher.render()
        assert renderer.last == ("not_found", None)

    def test_unknown_route_not_found(self, dispatcher, location, renderer):
        location.set("#/bogus/path")
        dispatcher.render()
        assert renderer.last == ("not_found", None)

    def test_render_course_detail_directly(self, dispatcher, renderer):
        dispatcher.render_course_detail("nope")
        assert renderer.last == ("not_found", None)


class TestStart:

    def test_empty_location_redirects_home(self, dispatcher, location, renderer):
        dispatcher.start()
        assert location.get() == "#/"
        assert [call[0] for call in renderer.calls] == ["home"]

    def test_existing_location_renders_once(self, catalog, store, renderer):
        location = MemoryLocation("#/course/graphics")
        dispatcher = ViewDispatcher(catalog, store, Router(location), renderer)
        dispatcher.start()
        assert [call[0] for call in renderer.calls] == ["course_detail"]

    def test_location_changes_rerender(self, dispatcher, location, renderer):
        dispatcher.start()
        location.set("#/course/graphics")
        location.set("#/nowhere")
        assert [call[0] for call in renderer.calls] == ["home", "course_detail", "not_found"]

    def test_subscribes_once(self, dispatcher, location, renderer):
        dispatcher.start()
        dispatcher.start()
        renderer.calls.clear()
        location.set("#/course/graphics")
        assert len(renderer.calls) == 1


class TestActions:

    def test_navigate_renders_via_notification(self, dispatcher, location, renderer):
        dispatcher.start()
        dispatcher.navigate(course_path("data-analytics"))
        assert location.get() == "#/course/data-analytics"
        assert renderer.last[0] == "course_detail"
        assert len(renderer.calls) == 2

    def test_navigate_without_subscription_does_not_render(self, dispatcher, location, renderer):
        dispatcher.navigate("/course/graphics")
        assert location.get() == "#/course/graphics"
        assert renderer.calls == []

    def test_toggle_lesson_persists_and_renders(self, dispatcher, location, renderer, store):
        location.set("#/course/graphics")
        dispatcher.toggle_lesson("graphics", "g-1", True)
        _, detail = renderer.last
        assert detail.metrics.done == 1
        assert store.get_course_state("graphics")[1].completed_lessons == {"g-1"}

    def test_toggle_unknown_course_still_renders(self, dispatcher, renderer, store):
        dispatcher.toggle_lesson("nope", "x-1", True)
        assert renderer.last[0] == "home"
        assert store.load() == {}

    def test_mark_course_complete(self, dispatcher, location, renderer):
        location.set("#/course/graphics")
        dispatcher.mark_course_complete("graphics")
        _, detail = renderer.last
        assert detail.metrics.is_completed is True
        assert detail.metrics.percent == 100
        assert all(row.is_done for row in detail.lessons)

    def test_reset_progress(self, dispatcher, renderer, store, graphics):
        store.mark_course_complete(graphics)
        dispatcher.reset_progress()
        view, cards = renderer.last
        assert view == "home"
        assert all(not card.metrics.is_completed for card in cards)
        assert store.load() == {}

    def test_graphics_walkthrough(self, dispatcher, location, renderer):
        dispatcher.start()
        dispatcher.navigate("/course/graphics")

        dispatcher.toggle_lesson("graphics", "g-1", True)
        dispatcher.toggle_lesson("graphics", "g-2", True)
        metrics = renderer.last[1].metrics
        assert (metrics.total, metrics.done, metrics.percent, metrics.is_completed) == (4, 2, 50, False)

        dispatcher.mark_course_complete("graphics")
        metrics = renderer.last[1].metrics
        assert (metrics.total, metrics.done, metrics.percent, metrics.is_completed) == (4, 4, 100, True)

        dispatcher.toggle_lesson("graphics", "g-1", False)
        metrics = renderer.last[1].metrics
        assert (metrics.total, metrics.done, metrics.percent, metrics.is_completed) == (4, 3, 75, True)

        dispatcher.navigate("/")
        cards = {card.course.id: card for card in renderer.last[1]}
        assert cards["graphics"].metrics.percent == 75
        assert cards["graphics"].metrics.is_completed is True
