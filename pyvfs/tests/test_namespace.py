"""
Namespace tests.

Run with: python -m pytest pyvfs/tests -v
"""

import copy
import unittest

from pyvfs.core.config_loader import ConfigLoader, NamespaceConfig
from pyvfs.exceptions import (
    AlreadyExistsError,
    EmptyNameError,
    EntryNotFoundError,
    InvalidPathError,
    NamespaceException,
    NotADirectoryError,
)
from pyvfs.filesystem import Directory, File, Namespace, PathResolver


class TestChangeDirectory(unittest.TestCase):
    """Test cd and cursor bookkeeping."""

    def setUp(self):
        self.ns = Namespace()
        self.ns.mkdir('/a')
        self.ns.mkdir('/a/b')
        self.ns.touch('/a/notes.txt', b'hi')
        self.ns.cd('/')

    def test_starts_at_root(self):
        ns = Namespace()
        self.assertEqual(ns.pwd(), '/')
        self.assertIs(ns.current, ns.root)
        self.assertEqual(len(ns.root), 0)

    def test_cd_relative_and_absolute(self):
        self.ns.cd('a')
        self.assertEqual(self.ns.cwd, '/a')
        self.ns.cd('b')
        self.assertEqual(self.ns.cwd, '/a/b')
        self.ns.cd('/a')
        self.assertEqual(self.ns.cwd, '/a')

    def test_cd_parent_and_current(self):
        self.ns.cd('/a/b')
        self.ns.cd('..')
        self.assertEqual(self.ns.cwd, '/a')
        self.ns.cd('.')
        self.assertEqual(self.ns.cwd, '/a')
        self.ns.cd('../../..')
        self.assertEqual(self.ns.cwd, '/')

    def test_cd_messy_path(self):
        self.ns.cd('//a/./b//../b/')
        self.assertEqual(self.ns.cwd, '/a/b')
        self.assertIs(self.ns.current, self.ns.root.lookup('a').lookup('b'))

    def test_cd_missing_leaves_cursor(self):
        """A failed cd leaves the cursor where it was."""
        self.ns.cd('/a')
        before = self.ns.current

        with self.assertRaises(EntryNotFoundError) as ctx:
            self.ns.cd('b/missing/deeper')

        self.assertEqual(ctx.exception.path, '/a/b/missing')
        self.assertEqual(ctx.exception.component, 'missing')
        self.assertEqual(self.ns.cwd, '/a')
        self.ns.cd('.')
        self.assertEqual(self.ns.cwd, '/a')
        self.assertIs(self.ns.current, before)

    def test_cd_through_file(self):
        self.ns.cd('/a')

        with self.assertRaises(NotADirectoryError) as ctx:
            self.ns.cd('notes.txt')
        self.assertEqual(ctx.exception.path, '/a/notes.txt')

        with self.assertRaises(NotADirectoryError):
            self.ns.cd('/a/notes.txt/b')

        self.assertEqual(self.ns.cwd, '/a')

    def test_errors_share_base_class(self):
        with self.assertRaises(NamespaceException):
            self.ns.cd('/nope')

    def test_root_is_reachable(self):
        self.ns.cd('/a/b')
        self.ns.cd('/')
        self.assertIs(self.ns.current, self.ns.root)


class TestMakeDirectory(unittest.TestCase):
    """Test mkdir and its cursor contract."""

    def setUp(self):
        self.ns = Namespace()

    def test_mkdir_then_cd(self):
        """A new directory is reachable from the post-mkdir cursor and empty."""
        self.ns.mkdir('x')
        self.ns.cd('x')

        self.assertEqual(self.ns.cwd, '/x')
        self.assertIsInstance(self.ns.current, Directory)
        self.assertEqual(len(self.ns.current), 0)

    def test_mkdir_from_subdirectory(self):
        self.ns.mkdir('home')
        self.ns.cd('home')
        self.ns.mkdir('user')

        self.assertEqual(self.ns.cwd, '/home')
        self.assertEqual(self.ns.listdir('/home'), ['user'])

    def test_mkdir_leaves_cursor_at_parent(self):
        """After success the cursor sits on the resolved parent."""
        self.ns.mkdir('/a')
        self.ns.mkdir('/a/b')
        self.ns.cd('/')

        self.ns.mkdir('a/b/c')

        self.assertEqual(self.ns.cwd, '/a/b')
        self.assertEqual(self.ns.listdir('.'), ['c'])

    def test_mkdir_inserts_reduced_leaf(self):
        self.ns.mkdir('/a')
        self.ns.cd('/')
        self.ns.mkdir('a/./b/../c/')

        self.assertEqual(self.ns.listdir('/a'), ['c'])

    def test_mkdir_existing(self):
        """A duplicate name fails and leaves the tree untouched."""
        self.ns.mkdir('/a')
        self.ns.mkdir('/a/b')
        self.ns.cd('/a/b')
        snapshot = copy.deepcopy(self.ns.root)

        with self.assertRaises(AlreadyExistsError) as ctx:
            self.ns.mkdir('/a')

        self.assertEqual(ctx.exception.path, '/a')
        self.assertEqual(self.ns.root, snapshot)
        self.assertEqual(self.ns.cwd, '/a/b')

    def test_mkdir_existing_file_name(self):
        self.ns.touch('f')
        with self.assertRaises(AlreadyExistsError):
            self.ns.mkdir('f')

    def test_mkdir_missing_parent(self):
        """An unresolvable parent restores the cursor and changes nothing."""
        self.ns.mkdir('/a')
        self.ns.cd('/a')
        snapshot = copy.deepcopy(self.ns.root)

        with self.assertRaises(EntryNotFoundError):
            self.ns.mkdir('/missing/child')

        self.assertEqual(self.ns.cwd, '/a')
        self.assertEqual(self.ns.root, snapshot)

    def test_mkdir_under_file(self):
        self.ns.touch('/f')
        with self.assertRaises(NotADirectoryError):
            self.ns.mkdir('/f/child')
        self.assertEqual(self.ns.cwd, '/')

    def test_mkdir_empty_name(self):
        with self.assertRaises(EmptyNameError):
            self.ns.mkdir('')
        with self.assertRaises(EmptyNameError):
            self.ns.mkdir('/')
        with self.assertRaises(EmptyNameError):
            self.ns.mkdir('.')
        with self.assertRaises(EmptyNameError):
            self.ns.mkdir('..')
        self.assertEqual(len(self.ns.root), 0)

    def test_mkdir_dot_inside_directory_names_cwd(self):
        """'.' below the root names the working directory itself."""
        self.ns.mkdir('/a')
        self.ns.cd('/a')
        with self.assertRaises(AlreadyExistsError):
            self.ns.mkdir('.')
        self.assertEqual(self.ns.cwd, '/a')

    def test_new_directory_attribs(self):
        self.ns.mkdir('d')
        attribs = self.ns.stat('/d').attribs

        self.assertEqual(attribs.mode, 0o755)
        self.assertEqual((attribs.uid, attribs.gid), (0, 0))


class TestMakeDirectoryRestoringCursor(unittest.TestCase):
    """Test mkdir when configured to return to the caller's directory."""

    def setUp(self):
        self.ns = Namespace(restore_cwd_after_mkdir=True)
        self.ns.mkdir('/a')
        self.ns.mkdir('/a/b')

    def test_cursor_returns_after_success(self):
        self.ns.cd('/a')
        self.ns.mkdir('b/c')

        self.assertEqual(self.ns.cwd, '/a')
        self.assertEqual(self.ns.listdir('b'), ['c'])

    def test_cursor_returns_after_failure(self):
        self.ns.cd('/a')
        with self.assertRaises(AlreadyExistsError):
            self.ns.mkdir('/a/b')
        self.assertEqual(self.ns.cwd, '/a')

    def test_from_config(self):
        ns = Namespace(NamespaceConfig(restore_cwd_after_mkdir=True))
        ns.mkdir('/x')
        ns.cd('/x')
        ns.mkdir('/y/../z')
        self.assertEqual(ns.cwd, '/x')

    def test_from_global_config(self):
        loader = ConfigLoader()
        try:
            loader.set('namespace.restore_cwd_after_mkdir', True)
            ns = Namespace()
            ns.mkdir('/x')
            ns.cd('/x')
            ns.mkdir('/y')
            self.assertEqual(ns.cwd, '/x')
        finally:
            loader.reset()

    def test_touch_cursor_returns_after_success(self):
        self.ns.cd('/a')
        self.ns.touch('/g')

        self.assertEqual(self.ns.cwd, '/a')
        self.assertTrue(self.ns.exists('/g'))

    def test_config_copied_at_construction(self):
        loader = ConfigLoader()
        try:
            ns = Namespace()
            loader.set('namespace.dir_mode', 0o700)
            ns.mkdir('/later')
            self.assertEqual(ns.stat('/later').attribs.mode, 0o755)
        finally:
            loader.reset()


class TestFiles(unittest.TestCase):
    """Test file creation and lookup."""

    def setUp(self):
        self.ns = Namespace()
        self.ns.mkdir('/etc')

    def test_touch(self):
        entry = self.ns.touch('/etc/hosts', b'127.0.0.1 localhost')

        self.assertIsInstance(entry, File)
        self.assertEqual(entry.name, 'hosts')
        self.assertEqual(entry.size, 19)
        self.assertIs(self.ns.stat('/etc/hosts'), entry)
        self.assertEqual(self.ns.cwd, '/etc')

    def test_touch_existing(self):
        self.ns.touch('/etc/hosts')
        with self.assertRaises(AlreadyExistsError):
            self.ns.touch('/etc/hosts')

    def test_touch_file_attribs(self):
        entry = self.ns.touch('/etc/passwd')
        self.assertEqual(entry.attribs.mode, 0o644)
        self.assertFalse(entry.is_directory)
        self.assertIsNone(entry.as_directory())

    def test_listdir_on_file(self):
        self.ns.touch('/etc/hosts')
        with self.assertRaises(NotADirectoryError):
            self.ns.listdir('/etc/hosts')

    def test_touch_existing_restores_cursor(self):
        self.ns.mkdir('/etc/x')
        self.ns.cd('/etc/x')
        self.ns.touch('/etc/hosts')
        self.ns.cd('/etc/x')

        with self.assertRaises(AlreadyExistsError):
            self.ns.touch('/etc/hosts')
        self.assertEqual(self.ns.cwd, '/etc/x')

    def test_touch_bad_parent_leaves_state(self):
        self.ns.touch('/etc/hosts')
        self.ns.cd('/etc')
        snapshot = copy.deepcopy(self.ns.root)

        with self.assertRaises(EntryNotFoundError):
            self.ns.touch('/zz/f')
        with self.assertRaises(NotADirectoryError):
            self.ns.touch('/etc/hosts/x')

        self.assertEqual(self.ns.cwd, '/etc')
        self.assertEqual(self.ns.root.to_dict(), snapshot.to_dict())

    def test_touch_root(self):
        with self.assertRaises(EmptyNameError):
            self.ns.touch('/')
        self.assertEqual(self.ns.cwd, '/')

    def test_touch_rejects_non_bytes(self):
        self.ns.cd('/etc')
        with self.assertRaises(TypeError):
            self.ns.touch('f', 5)

        self.assertEqual(self.ns.cwd, '/etc')
        self.assertEqual(self.ns.listdir('/etc'), [])


class TestLookup(unittest.TestCase):
    """Test stat, exists and listdir."""

    def setUp(self):
        self.ns = Namespace()
        self.ns.mkdir('/usr')
        self.ns.mkdir('/usr/bin')
        self.ns.mkdir('/usr/lib')
        self.ns.touch('/usr/bin/python')
        self.ns.cd('/usr')

    def test_stat_does_not_move_cursor(self):
        self.assertTrue(self.ns.stat('bin').is_directory)
        self.assertIs(self.ns.stat('/'), self.ns.root)
        self.assertIs(self.ns.stat('..'), self.ns.root)
        self.assertEqual(self.ns.cwd, '/usr')

    def test_stat_missing(self):
        with self.assertRaises(EntryNotFoundError) as ctx:
            self.ns.stat('share')
        self.assertEqual(ctx.exception.path, '/usr/share')

    def test_exists(self):
        self.assertTrue(self.ns.exists('bin/python'))
        self.assertTrue(self.ns.exists('/'))
        self.assertFalse(self.ns.exists('bin/python/x'))
        self.assertFalse(self.ns.exists('/opt'))

    def test_listdir(self):
        self.assertEqual(self.ns.listdir(), ['bin', 'lib'])
        self.assertEqual(self.ns.listdir('/'), ['usr'])
        self.assertEqual(self.ns.listdir('bin'), ['python'])


class TestInvalidPath(unittest.TestCase):
    """Test that unresolved markers never reach the tree."""

    def test_walk_rejects_unresolved_parent(self):
        root = Directory()
        root.insert('a', Directory())

        with self.assertRaises(InvalidPathError):
            root.walk(PathResolver.components('../a'))
        with self.assertRaises(InvalidPathError):
            root.walk(PathResolver.components('./a'))

    def test_cd_never_sees_unresolved_markers(self):
        """Targets are absolute, so leading ".." collapses at the root."""
        ns = Namespace()
        ns.mkdir('a')
        ns.cd('../../a')
        self.assertEqual(ns.cwd, '/a')


if __name__ == '__main__':
    unittest.main()
