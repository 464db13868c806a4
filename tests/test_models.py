from dataclasses import FrozenInstanceError

import pytest

from jardoc.models import (
    ApiDetails,
    CommentTags,
    MethodInfo,
    ModuleInfo,
    ProjectSourceDocumentation,
    PropertyInfo,
    RawClassInfo,
    RegistrationConfig,
    SourceDoc,
    Visibility,
)


def _source_doc(module_details=None):
    return SourceDoc(
        component_ref_name="FoobarComponent",
        component_doc_name="Foobar",
        group_doc_name="Layout",
        description="Some <strong>html</strong>",
        file_name="foobar.component.ts",
        selector="x-foobar",
        module_details=module_details,
        extend_classes=("BaseComponent",),
        api_details=ApiDetails(
            properties=(PropertyInfo(name="isSmall", declared_type="boolean",
                                     decorator_names=("@HostBinding('class.small')", "@Input()")),),
            methods=(MethodInfo(display_name="toggle()", description="Toggles it"),),
        ),
    )


def test_visibility_is_public():
    assert Visibility.DEFAULT.is_public
    assert Visibility.PUBLIC.is_public
    assert not Visibility.PROTECTED.is_public
    assert not Visibility.PRIVATE.is_public


def test_property_to_dict():
    prop = PropertyInfo(name="options", declared_type="string[]", decorator_names=("@Input()",))

    assert prop.to_dict() == {
        "propertyName": "options",
        "type": "string[]",
        "description": "",
        "decoratorNames": ["@Input()"],
    }


def test_method_to_dict():
    method = MethodInfo(display_name="open()", description="Opens it")

    assert method.to_dict() == {
        "methodName": "open()",
        "description": "Opens it",
        "decoratorNames": [],
    }


def test_source_doc_to_dict_matches_presentation_shape():
    module = ModuleInfo(module_ref_name="FoobarModule", file_name="foobar.module.ts",
                        declared_component_names=frozenset({"FoobarComponent"}))

    assert _source_doc(module).to_dict() == {
        "componentRefName": "FoobarComponent",
        "componentDocName": "Foobar",
        "groupDocName": "Layout",
        "description": "Some <strong>html</strong>",
        "fileName": "foobar.component.ts",
        "selector": "x-foobar",
        "moduleDetails": {"moduleRefName": "FoobarModule", "fileName": "foobar.module.ts"},
        "extendClasses": ["BaseComponent"],
        "apiDetails": {
            "properties": [{
                "propertyName": "isSmall",
                "type": "boolean",
                "description": "",
                "decoratorNames": ["@HostBinding('class.small')", "@Input()"],
            }],
            "methods": [{"methodName": "toggle()", "description": "Toggles it", "decoratorNames": []}],
        },
    }


def test_source_doc_without_module():
    assert _source_doc().to_dict()["moduleDetails"] is None


def test_raw_class_info_derived_fields():
    plain = RawClassInfo(name="Base", file_name="base.ts")
    child = RawClassInfo(
        name="Child",
        file_name="child.ts",
        extends_name="Base",
        registration_config=RegistrationConfig(selector="x-child"),
    )

    assert plain.extend_classes == ()
    assert not plain.is_component
    assert plain.doc_tags == CommentTags()
    assert child.extend_classes == ("Base",)
    assert child.is_component
    assert child.to_dict()["selector"] == "x-child"
    assert child.to_dict()["extendClasses"] == ["Base"]


def test_models_are_immutable():
    doc = _source_doc()

    with pytest.raises(FrozenInstanceError):
        doc.selector = "x-other"


def test_project_documentation_to_dict():
    documentation = ProjectSourceDocumentation(
        classes_with_docs=(_source_doc(),),
        other_classes=(RawClassInfo(name="Base", file_name="base.ts"),),
    )

    result = documentation.to_dict()

    assert [doc["componentRefName"] for doc in result["classesWithDocs"]] == ["FoobarComponent"]
    assert result["otherClasses"] == [{
        "componentRefName": "Base",
        "fileName": "base.ts",
        "selector": None,
        "extendClasses": [],
        "apiDetails": {"properties": [], "methods": []},
    }]
