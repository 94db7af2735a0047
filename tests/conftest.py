"""
Shared test fixtures and utilities for the dominoxml test suite.
"""

import pytest

from dominoxml.model import (
    CCM,
    EOT,
    Bank,
    CCMFolder,
    ControlChangeMacroList,
    DefaultData,
    Entry,
    InstrumentMap,
    Mark,
    ModuleData,
    ProgramChange,
    Table,
    Tempo,
    TimeSignature,
    Tone,
    Track,
    Value,
    drum_set_list,
    instrument_list,
)

SAMPLE_XML = """<?xml version="1.0" encoding="Shift_JIS"?>
<ModuleData Name="Test Module" Folder="Tests" Priority="10" FileCreator="tester" FileVersion="1.00" WebSite="https://example.com">
  <RhythmTrackDefault Gate="120"/>
  <ExclusiveEventDefault Data="@F0 @F7"/>
  <ProgramChangeEventPropertyDlg AutoPreviewDelay="500"/>
  <ControlChangeEventDefault ID="7"/>
  <InstrumentList>
    <Map Name="GM">
      <PC Name="Piano" PC="1">
        <Bank Name="Piano" LSB="0" MSB="0"/>
      </PC>
    </Map>
  </InstrumentList>
  <DrumSetList>
    <Map Name="GM Drums">
      <PC Name="Standard" PC="1">
        <Bank Name="Standard">
          <Tone Name="Kick" Key="36"/>
          <Tone Name="Snare" Key="38"/>
        </Bank>
      </PC>
    </Map>
  </DrumSetList>
  <ControlChangeMacroList>
    <Folder Name="Basic" ID="1">
      <CCM ID="7" Name="Volume" Color="#FF0000" Sync="Last">
        <Value Default="100" Min="0" Max="127"/>
        <Data>@CC 7 #VL</Data>
      </CCM>
      <Memo>Channel messages</Memo>
      <CCMLink ID="7" Value="64"/>
    </Folder>
    <FolderLink Name="Basic link" ID="1"/>
    <CCM ID="10" Name="Pan">
      <Value Min="-64" Max="63" Offset="64">
        <Entry Label="Left" Value="-64"/>
        <Entry Label="Center" Value="0"/>
      </Value>
      <Gate TableID="1"/>
    </CCM>
    <Table ID="1">
      <Entry Label="Off" Value="0"/>
    </Table>
  </ControlChangeMacroList>
  <TemplateList>
    <Folder Name="Setup">
      <Template ID="1" Name="Reset">
        <Memo>Reset all</Memo>
        <CC ID="7" Value="100"/>
        <PC PC="1" MSB="0" LSB="0" Mode="Auto"/>
        <Comment Text="done"/>
      </Template>
    </Folder>
  </TemplateList>
  <DefaultData>
    <Mark Meas="1" Name="Intro"/>
    <Track Name="Conductor" Mode="Conductor">
      <Tempo Tempo="120.000" Tick="0"/>
      <TimeSignature TimeSignature="4/4" Tick="0"/>
      <KeySignature KeySignature="C" Tick="0"/>
      <EOT Tick="1920"/>
    </Track>
    <Track Name="Piano" Ch="1" Current="1">
      <PC PC="1" Tick="0"/>
      <CC ID="7" Value="100" Tick="0"/>
      <Mark Name="A" Tick="0"/>
      <Comment Text="start" Tick="0"/>
      <Template ID="1" Tick="0"/>
      <EOT/>
    </Track>
  </DefaultData>
</ModuleData>
"""


@pytest.fixture
def sample_xml() -> str:
    """A module data document exercising every section."""
    return SAMPLE_XML


@pytest.fixture
def sample_module() -> ModuleData:
    """A valid module built in code, covering maps, macros and default data."""
    return ModuleData(
        name="Built Module",
        file_creator="tests",
        instrument_list=instrument_list(
            [
                InstrumentMap(
                    name="GM",
                    pcs=[ProgramChange(name="Piano", pc=1, banks=[Bank(name="Piano", lsb=0, msb=0)])],
                )
            ]
        ),
        drum_set_list=drum_set_list(
            [
                InstrumentMap(
                    name="Drums",
                    pcs=[
                        ProgramChange(
                            name="Standard",
                            pc=1,
                            banks=[Bank(name="Standard", tones=[Tone(name="Kick", key=36)])],
                        )
                    ],
                )
            ]
        ),
        control_change_macro_list=ControlChangeMacroList(
            items=[
                CCMFolder(
                    name="Basic",
                    id=1,
                    items=[
                        CCM(
                            id=7,
                            name="Volume",
                            value=Value(min=0, max=127, entries=[Entry(label="Max", value=127)]),
                            data="@CC 7 #VL",
                        ),
                        "memo text",
                    ],
                ),
                Table(id=2, entries=[Entry(label="Off", value=0)]),
            ]
        ),
        default_data=DefaultData(
            items=[
                Mark(meas=1, name="Intro"),
                Track(
                    name="Conductor",
                    mode="Conductor",
                    events=[
                        Tempo(tempo=120.5, tick=0),
                        TimeSignature(time_signature="3/4", tick=0),
                        EOT(tick=1440),
                    ],
                ),
            ]
        ),
    )
