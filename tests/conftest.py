import pytest

FOOBAR_COMPONENT = """
import { Component, Input, Output, EventEmitter, HostBinding } from '@angular/core';

interface ParentInterface {
    title: string;
}

/**
 * @group Layout
 * @component Foobar
 * @description
 * It's possible to use <strong>html</strong> in 
 * the description
 */
@Component({
    selector: 'x-foobar',
    template: 'test'
})
export class FoobarComponent {
    title: string;
    @Input() options: string[];
    @Output()
    changed: EventEmitter<boolean> = new EventEmitter();

    @HostBinding('class.small')
    @Input()
    isSmall: boolean = false;

    /**
     * Description to property should be parsed
     */
    propertyWithDescription: number;

    private privatePropertyShouldNotBeVisibleInParse: boolean = true;
    protected protectedPropertyShouldNotBeVisibleInParse: boolean = true;

    constructor(private elementRef: ElementRef) {}

    publicMethod(): number {
        return 1;
    }

    private privateMethodShouldNotBeVisibleInParse() {
        return true;
    }

    protected protectedMethodShouldNotBeVisibleInParse() {
        return true;
    }

    public methodWithPublicModifierShouldBeVisibleInParse() {
        return true;
    }

    /**
     * Description to method should be parsed
     */
    publicMethodWithDescription() {
        return 1;
    }
}
"""

FOOBAR_MODULE = """
import { NgModule } from '@angular/core';
import { CommonModule } from '@angular/common';

@NgModule({
    imports: [CommonModule],
    declarations: [FoobarComponent],
    exports: [FoobarComponent]
})
export class FoobarModule {
    // ...
}
"""

CHILD_COMPONENT = """
import { Component, Input, HostBinding } from '@angular/core';

/**
 * @group Layout
 * @component ChildComponent
 */
@Component({
    selector: 'x-child',
    template: 'test'
})
export class ChildComponent extends ParentComponent {
    childTitle: string;
    @Input() childOptions: string[];

    @HostBinding('class.small')
    @Input()
    childIsSmall: boolean = false;

    publicChildMethod(): number {
        return 1;
    }

    /**
     * Description to method should be parsed
     */
    public childMethodWithPublicModifierShouldBeVisibleInParse() {
        return true;
    }

    private childMethodShouldNotBeVisibleInParse() {
        return true;
    }
}
"""

PARENT_COMPONENT = """
import { Component } from '@angular/core';

export abstract class BaseComponent {
    /**
     * Base id description
     */
    baseId: number;

    publicBaseMethod() {
        return true;
    }

    private baseMethodShouldNotBeVisibleInParse() {
        return false;
    }
}

export class ParentComponent extends BaseComponent {
    /**
     * Parent property description
     */
    parentTitle: string;

    publicParentMethod(): number {
        return 1;
    }

    /**
     * Parent method description
     */
    publicParentMethodWithDescription(): number {
        return 1;
    }

    private parentMethodShouldNotBeVisibleInParse() {
        return true;
    }
}
"""

CHILD_GENERIC_COMPONENT = """
import { Component, Input, HostBinding } from '@angular/core';

/**
 * @group Layout
 * @component ChildGenericComponent
 */
@Component({
    selector: 'x-child-generic',
    template: 'test'
})
export class ChildGenericComponent extends ParentGenericComponent<string> {
    childTitle: string;
    @Input() childOptions: string[];

    @HostBinding('class.small')
    @Input()
    childIsSmall: boolean = false;

    publicChildMethod(): number {
        return 1;
    }

    /**
     * Description to method should be parsed
     */
    public childMethodWithPublicModifierShouldBeVisibleInParse() {
        return true;
    }

    private childMethodShouldNotBeVisibleInParse() {
        return true;
    }
}
"""

PARENT_GENERIC_COMPONENT = """
import { Component } from '@angular/core';

export class ParentGenericComponent<T> {
    /**
     * Parent property description
     */
    parentTitle: string;
    parentType: T;

    publicParentMethod(): number {
        return 1;
    }

    /**
     * Parent method description
     */
    publicParentMethodWithDescription(): number {
        return 1;
    }

    private parentMethodShouldNotBeVisibleInParse() {
        return true;
    }
}
"""

SCRIPT_WITHOUT_CLASSES = "const foobar = true;\n"


@pytest.fixture
def project_sources() -> dict[str, str]:
    """Component project sources keyed by file name, in program order."""
    return {
        "foobar.component.ts": FOOBAR_COMPONENT,
        "foobar.module.ts": FOOBAR_MODULE,
        "foobar.component.test.ts": SCRIPT_WITHOUT_CLASSES,
        "child.component.ts": CHILD_COMPONENT,
        "parent.component.ts": PARENT_COMPONENT,
        "child-generic.component.ts": CHILD_GENERIC_COMPONENT,
        "parent-generic.component.ts": PARENT_GENERIC_COMPONENT,
    }


@pytest.fixture
def project_dir(tmp_path, project_sources):
    """The component project written to disk under tmp_path/src/app."""
    app_dir = tmp_path / "src" / "app"
    app_dir.mkdir(parents=True)
    for file_name, source in project_sources.items():
        (app_dir / file_name).write_text(source)
    return tmp_path
