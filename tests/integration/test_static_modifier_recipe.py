"""End-to-end tests: Java source in, Java source out.

Uses the rewrite_run fixture from the staticize pytest plugin, configured
for com.yourorg.A.
"""

import pytest

from staticize import AddStaticModifierRecipe
from staticize.presentation.pytest_plugin.fixtures import RewriteRun

pytestmark = pytest.mark.rewrite


class TestRecipeExamples:
    """Canonical before/after examples."""

    def test_add_static_modifier_to_class_level_method(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                private static String magicWord1 = "magic1";
                private static String magicWord2 = "magic2";

                private String instanceData1 = "test1";
                String instanceData2 = "test2";

                private String getMagicWord1(int a, int b){
                    int test = 0;
                    int c = a;
                    return magicWord1;
                }

                private String getMagicWord2(int a, int b){
                    int test = instanceData2;
                    int c = a;
                    return magicWord2;
                }

                @Override
                private String getMagicWord3(int a, int b){
                    int test = 0;
                    int c = a;
                    return magicWord1;
                }
            }
            """,
            """
            package com.yourorg;

            class A {
                private static String magicWord1 = "magic1";
                private static String magicWord2 = "magic2";

                private String instanceData1 = "test1";
                String instanceData2 = "test2";

                private static String getMagicWord1(int a, int b){
                    int test = 0;
                    int c = a;
                    return magicWord1;
                }

                private String getMagicWord2(int a, int b){
                    int test = instanceData2;
                    int c = a;
                    return magicWord2;
                }

                @Override
                private String getMagicWord3(int a, int b){
                    int test = 0;
                    int c = a;
                    return magicWord1;
                }
            }
            """,
        )

    def test_getter_and_setter_of_static_field(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {

                private static String magicWord = "magic";

                private String getMagicWord () {
                    return magicWord;
                }

                private void setMagicWord(String v){
                    magicWord = v;
                }
            }
            """,
            """
            package com.yourorg;

            class A {

                private static String magicWord = "magic";

                private static String getMagicWord () {
                    return magicWord;
                }

                private static void setMagicWord(String v){
                    magicWord = v;
                }
            }
            """,
        )


class TestClosure:
    """Transitive eligibility through sibling calls."""

    def test_chain_ending_in_field_stays(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                private int count;

                int f() { return g(); }

                int g() { return h(); }

                int h() { return count; }
            }
            """
        )

    def test_pure_chain_promoted(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                int f() { return g() + 1; }

                int g() { return h(); }

                int h() { return 42; }
            }
            """,
            """
            package com.yourorg;

            class A {
                static int f() { return g() + 1; }

                static int g() { return h(); }

                static int h() { return 42; }
            }
            """,
        )

    def test_recursion_promoted(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                public long fact(int n) {
                    return n <= 1 ? 1 : n * fact(n - 1);
                }
            }
            """,
            """
            package com.yourorg;

            class A {
                public static long fact(int n) {
                    return n <= 1 ? 1 : n * fact(n - 1);
                }
            }
            """,
        )


class TestExclusions:
    """Methods that never change."""

    def test_super_this_constructor_abstract(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            abstract class A extends Base {
                A() { init(); }

                String name() { return super.name(); }

                A self() { return this; }

                abstract void run();

                static int helper() { return 1; }
            }
            """
        )

    def test_other_class_untouched(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class B {
                int f() { return 1; }
            }
            """
        )


class TestNestedClasses:
    """Nested class isolation."""

    def test_inner_class_fields_do_not_leak(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                int f() { return 1; }

                class Inner {
                    int value;

                    int g() { return value; }

                    int h() { return 2; }
                }
            }
            """,
            """
            package com.yourorg;

            class A {
                static int f() { return 1; }

                class Inner {
                    int value;

                    int g() { return value; }

                    int h() { return 2; }
                }
            }
            """,
        )

    def test_nested_target(self) -> None:
        run = RewriteRun(AddStaticModifierRecipe("com.yourorg.A$Inner"))
        run(
            """
            package com.yourorg;

            class A {
                int f() { return 1; }

                static class Inner {
                    int g() { return 2; }
                }
            }
            """,
            """
            package com.yourorg;

            class A {
                int f() { return 1; }

                static class Inner {
                    static int g() { return 2; }
                }
            }
            """,
        )

    def test_inner_target_reading_outer_state(self) -> None:
        run = RewriteRun(AddStaticModifierRecipe("com.yourorg.A$B"))
        run(
            """
            package com.yourorg;

            class A {
                int outerField;

                void outerMethod() { outerField++; }

                class B {
                    int f() { return outerField; }

                    void g() { outerMethod(); }

                    int h() { return 1; }
                }
            }
            """,
            """
            package com.yourorg;

            class A {
                int outerField;

                void outerMethod() { outerField++; }

                class B {
                    int f() { return outerField; }

                    void g() { outerMethod(); }

                    static int h() { return 1; }
                }
            }
            """,
        )

    def test_static_nested_target_ignores_outer_names(self) -> None:
        run = RewriteRun(AddStaticModifierRecipe("com.yourorg.A$B"))
        run(
            """
            package com.yourorg;

            class A {
                int value;

                static class B {
                    int twice(A a) { return a.value * 2; }
                }
            }
            """,
            """
            package com.yourorg;

            class A {
                int value;

                static class B {
                    static int twice(A a) { return a.value * 2; }
                }
            }
            """,
        )

    def test_creating_inner_class_keeps_instance_binding(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                class B {}

                static class C {}

                B make() { return new B(); }

                C makeNested() { return new C(); }

                B adopt(A other) { return other.new B(); }
            }
            """,
            """
            package com.yourorg;

            class A {
                class B {}

                static class C {}

                B make() { return new B(); }

                static C makeNested() { return new C(); }

                static B adopt(A other) { return other.new B(); }
            }
            """,
        )

    def test_anonymous_class_using_outer_field(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                private int count;

                Runnable task() {
                    return new Runnable() {
                        public void run() { System.out.println(count); }
                    };
                }
            }
            """
        )


class TestFormatting:
    """Formatting of the inserted modifier."""

    def test_annotation_on_own_line(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                @Deprecated
                int f() { return 1; }
            }
            """,
            """
            package com.yourorg;

            class A {
                @Deprecated
                static int f() { return 1; }
            }
            """,
        )

    def test_comments_preserved(self, rewrite_run: RewriteRun) -> None:
        rewrite_run(
            """
            package com.yourorg;

            class A {
                // pure helper
                /* keeps */ private int f() { return 1; } // done
            }
            """,
            """
            package com.yourorg;

            class A {
                // pure helper
                /* keeps */ private static int f() { return 1; } // done
            }
            """,
        )
