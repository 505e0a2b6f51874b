import os.path
import runpy
import unittest
from unittest import mock

CONF = os.path.join(os.path.dirname(os.path.dirname(__file__)), "gunicorn.conf.py")


def load(**env):
    with mock.patch.dict(os.environ, env):
        return runpy.run_path(CONF)


class TestGunicornConf(unittest.TestCase):
    def test_sync_by_default(self):
        with mock.patch.dict(os.environ):
            os.environ.pop("LL1_WORKER_CLASS", None)
            conf = runpy.run_path(CONF)
        self.assertEqual(conf["worker_class"], "sync")
        self.assertNotIn("worker_connections", conf)

    def test_gevent_opt_in(self):
        conf = load(LL1_WORKER_CLASS="gevent")
        self.assertEqual(conf["worker_class"], "gevent")
        self.assertEqual(conf["worker_connections"], 100)

    def test_overrides(self):
        conf = load(LL1_BIND="127.0.0.1:8000", LL1_WORKERS="3", LL1_TIMEOUT="10")
        self.assertEqual(conf["bind"], "127.0.0.1:8000")
        self.assertEqual(conf["workers"], 3)
        self.assertEqual(conf["timeout"], 10)
        self.assertEqual(conf["graceful_timeout"], 10)


if __name__ == "__main__":
    unittest.main()
