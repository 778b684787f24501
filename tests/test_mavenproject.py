import os
import tempfile
from os.path import basename, join

from mxjmod import ArtifactConflictError, ConfigurationError, JModProject, request_from_configuration
from mxjmod._impl.mavenproject import ETMavenPOM, PropertySubstitution

POM = """
<project xmlns="http://maven.apache.org/POM/4.0.0" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/maven-v4_0_0.xsd">
<modelVersion>4.0.0</modelVersion>
<parent>
<groupId>org.example</groupId>
<artifactId>parent</artifactId>
<version>3.1</version>
</parent>
<artifactId>app</artifactId>
<packaging>jmod</packaging>
<properties>
<native.dir>native</native.dir>
</properties>
<build>
<directory>out</directory>
<plugins>
<plugin>
<groupId>org.apache.maven.plugins</groupId>
<artifactId>maven-compiler-plugin</artifactId>
<configuration><release>11</release></configuration>
</plugin>
<plugin>
<groupId>org.apache.maven.plugins</groupId>
<artifactId>maven-jmod-plugin</artifactId>
<configuration>
<mainClass>org.example.Main</mainClass>
<moduleVersion>${project.version}-custom</moduleVersion>
<doNotResolveByDefault>true</doNotResolveByDefault>
<warnIfResolved>incubating</warnIfResolved>
<libs><lib>${native.dir}/lib</lib><lib>${project.basedir}/more</lib></libs>
<excludes><exclude>**/*.txt</exclude></excludes>
</configuration>
</plugin>
</plugins>
</build>
<dependencies>
<dependency>
<groupId>org.example</groupId>
<artifactId>tools</artifactId>
<version>1</version>
<scope>system</scope>
<systemPath>${basedir}/lib/tools.jar</systemPath>
</dependency>
<dependency>
<groupId>junit</groupId>
<artifactId>junit</artifactId>
<version>4.13</version>
</dependency>
</dependencies>
</project>
"""


def _write(path, text):
    with open(path, "w") as f:
        f.write(text)


def test_pom_helper():
    with tempfile.TemporaryDirectory() as tmp:
        _write(join(tmp, "pom.xml"), POM)
        pom = ETMavenPOM(join(tmp, "pom.xml"))
        assert pom["artifactId"].text == "app"
        try:
            pom["moupId"]
        except KeyError:
            pass
        else:
            assert False, "should have raised KeyError"
        assert pom.get_text("packaging") == "jmod"
        assert pom.get_text("shmartifactId", "foo") == "foo"
        assert pom.get("shmartifactId") is None
        assert len(pom.getall("build/plugins/plugin")) == 2
        assert [e.localname for e in pom["properties"].children()] == ["native.dir"]


def test_pom_without_namespace():
    with tempfile.TemporaryDirectory() as tmp:
        _write(join(tmp, "pom.xml"), "<project><artifactId>bare</artifactId><version>1</version></project>")
        project = JModProject.load(tmp)
        assert project.artifact_id == "bare"
        assert project.version == "1"


def test_malformed_pom():
    with tempfile.TemporaryDirectory() as tmp:
        _write(join(tmp, "pom.xml"), "<project><artifactId>bare</project>")
        try:
            JModProject.load(tmp)
        except ConfigurationError as e:
            assert "pom.xml" in str(e)
        else:
            assert False, "malformed pom must be rejected"


def test_pom_with_entity_declarations_is_rejected():
    with tempfile.TemporaryDirectory() as tmp:
        _write(
            join(tmp, "pom.xml"),
            '<?xml version="1.0"?><!DOCTYPE p [<!ENTITY a "aaaa">]><project><artifactId>&a;</artifactId></project>',
        )
        try:
            JModProject.load(tmp)
        except ConfigurationError:
            pass
        else:
            assert False, "entity declarations must be rejected"


def test_project_without_pom():
    with tempfile.TemporaryDirectory() as tmp:
        project = JModProject.load(tmp)
        base = os.path.abspath(tmp)
        assert project.artifact_id == basename(base)
        assert project.version is None
        assert project.build_directory == join(base, "target")
        assert project.output_directory == join(base, "target", "classes")
        assert project.default_jmod_file() == join(base, "target", "jmods", basename(base) + ".jmod")
        request = request_from_configuration(project)
        assert request.module_version is None
        assert request.main_class is None
        assert request.libs == []


def test_project_from_pom():
    with tempfile.TemporaryDirectory() as tmp:
        _write(join(tmp, "pom.xml"), POM)
        project = JModProject.load(tmp)
        base = os.path.abspath(tmp)
        assert str(project) == "org.example:app:3.1"
        assert project.build_directory == join(base, "out")
        assert project.output_directory == join(base, "out", "classes")
        assert project.dependencies == [join(base, "lib", "tools.jar")]
        assert project.default_jmod_file() == join(base, "out", "jmods", "app.jmod")

        request = request_from_configuration(project)
        assert request.main_class == "org.example.Main"
        assert request.module_version == "3.1-custom"
        assert request.do_not_resolve_by_default
        assert request.warn_if_resolved == "incubating"
        assert request.libs == ["native/lib", join(base, "more")]
        assert request.excludes == ["**/*.txt"]
        assert request.cmds == []


def test_module_version_defaults_to_project_version():
    with tempfile.TemporaryDirectory() as tmp:
        _write(join(tmp, "pom.xml"), POM.replace("<moduleVersion>${project.version}-custom</moduleVersion>", ""))
        assert request_from_configuration(JModProject.load(tmp)).module_version == "3.1"


def test_existing_jar_is_the_project_artifact():
    with tempfile.TemporaryDirectory() as tmp:
        _write(join(tmp, "pom.xml"), POM.replace("<packaging>jmod</packaging>", ""))
        assert not JModProject.load(tmp).has_artifact()
        os.makedirs(join(tmp, "out"))
        _write(join(tmp, "out", "app-3.1.jar"), "jar")
        project = JModProject.load(tmp)
        assert project.has_artifact()
        try:
            project.check_no_artifact()
        except ArtifactConflictError as e:
            assert e.exit_code == 3
            assert "classifier" in str(e)
        else:
            assert False, "the jar is already attached"


def test_attach_artifact_once():
    with tempfile.TemporaryDirectory() as tmp:
        project = JModProject(tmp, "app")
        jmod = join(tmp, "app.jmod")
        _write(jmod, "jmod")
        project.attach_artifact(jmod)
        assert project.artifact_file == jmod
        try:
            project.attach_artifact(jmod)
        except ArtifactConflictError:
            pass
        else:
            assert False, "a second artifact must be rejected"


def test_property_substitution():
    subst = PropertySubstitution()
    subst.register("a", "1")
    subst.register("b", lambda: "2")
    subst.register("none", lambda: None)
    assert subst.substitute("${a}-${b}-${c}-${none}") == "1-2-${c}-${none}"
    assert subst.substitute(None) is None
