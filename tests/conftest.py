# tests/conftest.py

import random

import pytest

from core.scheduler import ManualScheduler
from models.class_list import ClassList
from models.student import Student
from tests.doubles import DELAY, SEED, RecordingObserver


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def rng():
    return random.Random(SEED)


@pytest.fixture
def make_student(observer, scheduler, rng):
    def factory(full_name: str, email: str = "student@mmm.edu") -> Student:
        return Student(
            full_name,
            email,
            observer=observer,
            scheduler=scheduler,
            rng=rng,
            delay=DELAY,
        )

    return factory


@pytest.fixture
def sample_student(make_student):
    return make_student("Ana Lopez", "alopez@mmm.edu")


@pytest.fixture
def sample_class_list(observer, make_student):
    class_list = ClassList(observer)
    class_list.add_student(make_student("Sean Cameron", "scameron@mmm.edu"))
    class_list.add_student(make_student("Paul Atreides", "patreides@mmm.edu"))
    return class_list
